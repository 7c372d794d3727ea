"""Date and ID helpers shared by the validation rules."""
