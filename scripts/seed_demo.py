#!/usr/bin/env python3
"""
Seed script to create the restaurant settings and a demo menu
"""

import asyncio

DEMO_MENU_ITEMS = [
    {
        "name": "Classic Margherita Pizza",
        "category": "Main Courses",
        "price": 480.0,
        "description": "Fresh mozzarella, basil, and tomato sauce on a thin crust. A timeless classic.",
        "ingredients": ["Dough", "Tomato Sauce", "Fresh Mozzarella", "Basil", "Olive Oil", "Oregano"],
        "tags": ["vegetarian"],
        "availability": True,
        "prep_time": 20,
    },
    {
        "name": "Spicy Sriracha Burger",
        "category": "Main Courses",
        "price": 580.0,
        "description": "Juicy beef patty with house-made sriracha mayo, crisp jalapenos, and pepper jack cheese on a toasted brioche bun.",
        "ingredients": ["Beef Patty", "Brioche Bun", "Sriracha Mayo", "Jalapenos", "Pepper Jack Cheese", "Lettuce", "Tomato", "Red Onion"],
        "tags": ["spicy"],
        "availability": True,
        "prep_time": 25,
    },
    {
        "name": "Vegan Buddha Bowl",
        "category": "Salads",
        "price": 420.0,
        "description": "A vibrant bowl of quinoa, roasted sweet potatoes, seasoned chickpeas, fresh avocado, and a creamy tahini dressing.",
        "ingredients": ["Quinoa", "Sweet Potatoes", "Chickpeas", "Avocado", "Spinach", "Cucumber", "Carrots", "Tahini Dressing"],
        "tags": ["vegan", "gluten-free"],
        "availability": True,
        "prep_time": 18,
    },
    {
        "name": "Decadent Chocolate Lava Cake",
        "category": "Desserts",
        "price": 350.0,
        "description": "Warm, rich chocolate cake with a gooey molten center, served with a scoop of premium vanilla bean ice cream and a raspberry coulis.",
        "ingredients": ["Dark Chocolate", "Flour", "Sugar", "Eggs", "Butter", "Vanilla Ice Cream", "Raspberries"],
        "tags": ["vegetarian"],
        "availability": True,
        "prep_time": 22,
    },
    {
        "name": "Grilled Chicken Caesar Salad",
        "category": "Salads",
        "price": 450.0,
        "description": "Crisp romaine lettuce, tender grilled chicken breast, house-made croutons, shaved Parmesan, and a classic Caesar dressing.",
        "ingredients": ["Romaine Lettuce", "Grilled Chicken Breast", "Croutons", "Parmesan Cheese", "Caesar Dressing", "Black Pepper"],
        "tags": [],
        "availability": True,
        "prep_time": 15,
    },
    {
        "name": "Creamy Tomato Pasta",
        "category": "Main Courses",
        "price": 510.0,
        "description": "Penne pasta tossed in a rich and creamy tomato sauce with a hint of garlic and basil, topped with Parmesan.",
        "ingredients": ["Penne Pasta", "Tomato Sauce", "Heavy Cream", "Garlic", "Basil", "Parmesan Cheese", "Olive Oil"],
        "tags": ["vegetarian"],
        "availability": True,
        "prep_time": 23,
    },
    {
        "name": "Sparkling Berry Lemonade",
        "category": "Beverages",
        "price": 220.0,
        "description": "Homemade lemonade infused with mixed berries and a splash of soda water for a refreshing fizz.",
        "ingredients": ["Lemons", "Mixed Berries (Strawberries, Blueberries, Raspberries)", "Water", "Sugar", "Soda Water", "Mint"],
        "tags": ["vegan", "gluten-free"],
        "availability": True,
        "prep_time": 7,
    },
    {
        "name": "Crispy Calamari Rings",
        "category": "Appetizers",
        "price": 380.0,
        "description": "Tender calamari rings, lightly battered and fried to golden perfection. Served with a zesty marinara sauce.",
        "ingredients": ["Calamari", "Flour", "Cornstarch", "Egg", "Breadcrumbs", "Marinara Sauce", "Lemon Wedges"],
        "tags": [],
        "availability": True,
        "prep_time": 15,
    },
    {
        "name": "Hearty Minestrone Soup",
        "category": "Soups",
        "price": 300.0,
        "description": "A classic Italian vegetable soup made with a rich tomato broth, beans, pasta, and seasonal vegetables.",
        "ingredients": ["Carrots", "Celery", "Onions", "Zucchini", "Kidney Beans", "Cannellini Beans", "Ditalini Pasta", "Tomato Broth", "Herbs"],
        "tags": ["vegan", "vegetarian"],
        "availability": False,
        "prep_time": 30,
    },
    {
        "name": "Club Sandwich Deluxe",
        "category": "Sandwiches",
        "price": 450.0,
        "description": "Triple-decker sandwich with roasted turkey, crispy bacon, lettuce, tomato, and mayonnaise on toasted white bread. Served with fries.",
        "ingredients": ["White Bread", "Turkey Breast", "Bacon", "Lettuce", "Tomato", "Mayonnaise", "Fries"],
        "tags": [],
        "availability": True,
        "prep_time": 18,
    },
]


async def seed_demo_data(session_factory=None) -> int:
    """Seed demo data for development. Returns the number of menu items created."""
    from sqlalchemy import func, select

    from eatkwik.api.menu import placeholder_image_url
    from eatkwik.api.settings import get_or_create_settings
    from eatkwik.database import SessionLocal, init_db
    from eatkwik.models.menu import MenuItem

    if session_factory is None:
        await init_db()
        session_factory = SessionLocal

    async with session_factory() as db:
        restaurant = await get_or_create_settings(db)
        print(f"Restaurant settings: {restaurant.restaurant_name}")

        existing = await db.scalar(select(func.count()).select_from(MenuItem))
        if existing:
            print("Menu already has items. Skipping...")
            return 0

        print("Creating demo menu...")
        for item_data in DEMO_MENU_ITEMS:
            db.add(
                MenuItem(
                    **item_data,
                    image_url=placeholder_image_url(item_data["name"]),
                    feedbacks=[],
                    average_rating=0,
                )
            )
        await db.commit()

        print(f"Created {len(DEMO_MENU_ITEMS)} menu items")
        return len(DEMO_MENU_ITEMS)


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
