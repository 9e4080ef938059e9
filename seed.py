from datetime import date

from nutrition_tracker import create_app
from nutrition_tracker.extensions import db
from nutrition_tracker.models.account import Account
from nutrition_tracker.models.user import User
from nutrition_tracker.models.goal import NutritionGoal
from nutrition_tracker.models.favorite import FavoriteFood
from nutrition_tracker.services.food_log_service import add_entry
from nutrition_tracker.utils.auth import hash_password

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    account = Account.query.filter_by(username="demo").first()
    if not account:
        account = Account(username="demo", password=hash_password("secret"))
        db.session.add(account)
        db.session.flush()

    user = User.query.filter_by(account_id=account.id, name="Demo User").first()
    if not user:
        user = User(name="Demo User", account_id=account.id)
        db.session.add(user)
        db.session.flush()

    if not NutritionGoal.query.filter_by(user_id=user.id).first():
        db.session.add(NutritionGoal(
            user_id=user.id, calorie_goal=2000, protein_goal=120,
            carbs_goal=250, fat_goal=65, sodium_goal=2300, sugar_goal=50,
        ))

    def add_fav(name, qty, unit, cal, p, c, f, meal_type):
        if not FavoriteFood.query.filter_by(user_id=user.id, food_name=name).first():
            db.session.add(FavoriteFood(
                user_id=user.id, food_name=name, quantity=qty, unit=unit,
                calories=cal, protein=p, carbs=c, fat=f, meal_type=meal_type,
            ))

    add_fav("Oatmeal with banana", 1, "bowl", 310, 9.5, 58.0, 5.2, "breakfast")
    add_fav("Grilled chicken salad", 1, "plate", 420, 38.0, 14.0, 22.0, "lunch")
    add_fav("Greek yogurt", 170, "g", 100, 17.0, 6.0, 0.7, "snack")

    db.session.commit()

    today = date.today()
    if not user.food_logs:
        add_entry(user.id, {
            "food_name": "Scrambled eggs", "quantity": 2, "unit": "eggs",
            "calories": 182, "protein": 12.6, "carbs": 1.6, "fat": 13.4,
            "cholesterol": 372, "meal_type": "breakfast",
        }, today)

    print("Seed completed.")
