from nutrition_tracker.models.account import Account
from nutrition_tracker.models.user import User
from nutrition_tracker.models.goal import NutritionGoal
from nutrition_tracker.models.food_log import FoodLog, FoodEntry
from nutrition_tracker.models.favorite import FavoriteFood

__all__ = ["Account", "User", "NutritionGoal", "FoodLog", "FoodEntry", "FavoriteFood"]
