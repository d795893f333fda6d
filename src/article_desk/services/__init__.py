"""Business logic for the article lifecycle."""
