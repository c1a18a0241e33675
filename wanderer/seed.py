"""Seed script for the Wanderer Albay development database."""

import asyncio

from passlib.context import CryptContext
from sqlalchemy import select

from wanderer.database import async_session_factory, init_db
from wanderer.models.catalog import Accommodation, Category, Restaurant, Subcategory, TouristSpot
from wanderer.models.user import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# ── Users ──────────────────────────────────────────────────────────────────────

USERS = [
    {
        "email": "admin@wanderer-albay.ph",
        "password": "admin123",
        "full_name": "Wanderer Admin",
        "role": "admin",
    },
    {
        "email": "juan@wanderer-albay.ph",
        "password": "password123",
        "full_name": "Juan Dela Cruz",
        "role": "user",
    },
]

# ── Onboarding categories ──────────────────────────────────────────────────────

CATEGORIES = {
    ("Nature", "🌳"): [
        ("Volcanoes", "Mayon and the surrounding lava fields"),
        ("Waterfalls", "Falls and river pools"),
        ("Lakes", "Crater and mountain lakes"),
        ("Beach", "White and black sand coastlines"),
    ],
    ("Culture", "🏯"): [
        ("Churches", "Spanish-era churches"),
        ("Heritage", "Ruins and historic sites"),
        ("Museums", "Local history and art"),
        ("Festivals", "Town fiestas and celebrations"),
    ],
    ("Adventure", "🧗"): [
        ("ATV Rides", "Lava trail ATV tours"),
        ("Hiking", "Trails and summit climbs"),
        ("Ziplines", "Canopy and lake ziplines"),
        ("Caving", "Limestone caves"),
    ],
    ("Food", "🍜"): [
        ("Local Cuisine", "Bicolano dishes"),
        ("Street Food", "Markets and stalls"),
        ("Cafes", "Coffee with a view"),
    ],
}

# ── Tourist spots ──────────────────────────────────────────────────────────────

SPOTS = [
    {
        "name": "Mayon Volcano",
        "description": "Near-perfect cone volcano and the symbol of Albay.",
        "location": "Legazpi City, Albay",
        "municipality": "Legazpi",
        "category": ["Nature", "Adventure", "Volcanoes", "Hiking"],
        "latitude": 13.2548,
        "longitude": 123.6858,
        "rating": 4.9,
    },
    {
        "name": "Cagsawa Ruins",
        "description": "Remains of an 18th-century church buried by the 1814 eruption.",
        "location": "Busay, Daraga, Albay",
        "municipality": "Daraga",
        "category": ["Culture", "Heritage"],
        "latitude": 13.1660,
        "longitude": 123.7018,
        "rating": 4.7,
    },
    {
        "name": "Daraga Church",
        "description": "Baroque church on a hill overlooking Mayon.",
        "location": "Daraga, Albay",
        "municipality": "Daraga",
        "category": ["Culture", "Churches", "Heritage"],
        "latitude": 13.1489,
        "longitude": 123.7127,
        "rating": 4.6,
    },
    {
        "name": "Lignon Hill Nature Park",
        "description": "Viewpoint with zipline and trails above Legazpi.",
        "location": "Legazpi City, Albay",
        "municipality": "Legazpi",
        "category": ["Nature", "Adventure", "Ziplines", "Parks", "Sunset Views"],
        "latitude": 13.1541,
        "longitude": 123.7296,
        "rating": 4.5,
    },
    {
        "name": "Sumlang Lake",
        "description": "Lake with bamboo rafts and an unobstructed view of Mayon.",
        "location": "Sumlang, Camalig, Albay",
        "municipality": "Camalig",
        "category": ["Nature", "Lakes"],
        "latitude": 13.1738,
        "longitude": 123.6580,
        "rating": 4.6,
    },
    {
        "name": "Hoyop-Hoyopan Cave",
        "description": "Limestone cave where prehistoric artifacts were found.",
        "location": "Cotmon, Camalig, Albay",
        "municipality": "Camalig",
        "category": ["Adventure", "Caving", "Nature"],
        "latitude": 13.1333,
        "longitude": 123.6333,
        "rating": 4.3,
        "is_hidden_gem": True,
    },
    {
        "name": "Quitinday Green Hills",
        "description": "Rolling chocolate-hill-like mounds in the countryside.",
        "location": "Quitinday, Camalig, Albay",
        "municipality": "Camalig",
        "category": ["Nature", "Hiking"],
        "latitude": 13.1606,
        "longitude": 123.6250,
        "rating": 4.4,
        "is_hidden_gem": True,
    },
    {
        "name": "Misibis Bay",
        "description": "Island resort cove on Cagraray Island.",
        "location": "Cagraray Island, Bacacay, Albay",
        "municipality": "Bacacay",
        "category": ["Nature", "Beach", "Resorts"],
        "latitude": 13.2667,
        "longitude": 123.8833,
        "rating": 4.6,
    },
    {
        "name": "Tiwi Hot Springs",
        "description": "Geothermal springs and pools in northern Albay.",
        "location": "Tiwi, Albay",
        "municipality": "Tiwi",
        "category": ["Nature"],
        "latitude": 13.4583,
        "longitude": 123.6800,
        "rating": 4.0,
        "is_hidden_gem": True,
    },
    {
        "name": "Embarcadero de Legazpi",
        "description": "Waterfront mall and boardwalk with food stalls.",
        "location": "Legazpi Boulevard, Legazpi City, Albay",
        "municipality": "Legazpi",
        "category": ["Food", "Street Food", "Sunset Views"],
        "latitude": 13.1433,
        "longitude": 123.7586,
        "rating": 4.2,
    },
    {
        "name": "Ligao Kawa-Kawa Hill",
        "description": "Hill with Stations of the Cross and a wide view of the plains.",
        "location": "Ligao City, Albay",
        "municipality": "Ligao",
        "category": ["Culture", "Hiking", "Churches"],
        "latitude": 13.2200,
        "longitude": 123.5300,
        "rating": 4.1,
    },
]

# ── Accommodations ─────────────────────────────────────────────────────────────

ACCOMMODATIONS = [
    {
        "name": "The Oriental Legazpi",
        "description": "Hilltop hotel overlooking Albay Gulf and Mayon.",
        "location": "Taysan Hill, Legazpi City, Albay",
        "municipality": "Legazpi",
        "category": ["Luxury"],
        "amenities": ["Pool", "Restaurant", "WiFi", "Parking"],
        "price_range": "₱4,500 - ₱9,000",
        "rating": 4.5,
        "latitude": 13.1320,
        "longitude": 123.7290,
    },
    {
        "name": "Misibis Bay Resort",
        "description": "Private island resort with water sports.",
        "location": "Cagraray Island, Bacacay, Albay",
        "municipality": "Bacacay",
        "category": ["Luxury", "Beach Resort"],
        "amenities": ["Beach", "Spa", "Pool", "Restaurant"],
        "price_range": "₱12,000 - ₱25,000",
        "rating": 4.7,
        "latitude": 13.2667,
        "longitude": 123.8833,
    },
    {
        "name": "Casablanca Suites Daraga",
        "description": "Mid-range hotel near Cagsawa.",
        "location": "Daraga, Albay",
        "municipality": "Daraga",
        "category": ["Mid-range", "Business Hotel"],
        "amenities": ["WiFi", "Restaurant", "Parking"],
        "price_range": "₱2,000 - ₱3,500",
        "rating": 4.1,
    },
    {
        "name": "Mayon Backpackers Hostel",
        "description": "Budget dorms and private rooms in the city center.",
        "location": "Legazpi City, Albay",
        "municipality": "Legazpi",
        "category": ["Budget"],
        "amenities": ["WiFi", "Shared Kitchen"],
        "price_range": "₱500 - ₱1,200",
        "rating": 4.3,
    },
    {
        "name": "Tabaco Bay Boutique Inn",
        "description": "Small inn near the Tabaco port.",
        "location": "Tabaco City, Albay",
        "municipality": "Tabaco",
        "category": ["Boutique", "Mid-range"],
        "amenities": ["WiFi", "Breakfast"],
        "price_range": "₱1,800 - ₱3,000",
        "rating": 4.0,
    },
]

# ── Restaurants ────────────────────────────────────────────────────────────────

RESTAURANTS = [
    {
        "name": "1st Colonial Grill",
        "description": "Home of the sili ice cream.",
        "location": "Legazpi City, Albay",
        "municipality": "Legazpi",
        "food_type": "Bicolano",
    },
    {
        "name": "Small Talk Café",
        "description": "Bicol express pasta and pinangat.",
        "location": "Legazpi City, Albay",
        "municipality": "Legazpi",
        "food_type": "Café",
    },
    {
        "name": "Let's Cook Restaurant",
        "description": "Filipino comfort food close to Cagsawa.",
        "location": "Daraga, Albay",
        "municipality": "Daraga",
        "food_type": "Filipino",
    },
    {
        "name": "Bigg's Diner",
        "description": "Regional diner chain founded in Bicol.",
        "location": "Tabaco City, Albay",
        "municipality": "Tabaco",
        "food_type": "American",
    },
    {
        "name": "Camalig Pinangat House",
        "description": "Pinangat straight from the town that made it famous.",
        "location": "Camalig, Albay",
        "municipality": "Camalig",
        "food_type": "Bicolano",
    },
    {
        "name": "Ligao Kakanin Corner",
        "description": "Rice cakes and native snacks.",
        "location": "Ligao City, Albay",
        "municipality": "Ligao",
        "food_type": "Native delicacies",
    },
]


async def seed(session_factory=async_session_factory):
    async with session_factory() as db:
        # Check if already seeded
        result = await db.execute(select(User).limit(1))
        if result.scalar_one_or_none():
            print("Database already seeded. Skipping.")
            return

        # ── Users ──
        for u in USERS:
            db.add(User(
                email=u["email"],
                password_hash=pwd_context.hash(u["password"]),
                full_name=u["full_name"],
                role=u["role"],
            ))
        print(f"Created {len(USERS)} users (admin: {USERS[0]['email']})")

        # ── Categories ──
        sub_count = 0
        for (name, icon), subs in CATEGORIES.items():
            category = Category(name=name, icon=icon)
            category.subcategories = [Subcategory(name=s, description=d) for s, d in subs]
            sub_count += len(subs)
            db.add(category)
        print(f"Created {len(CATEGORIES)} categories with {sub_count} subcategories")

        # ── Catalog ──
        db.add_all(TouristSpot(**s) for s in SPOTS)
        db.add_all(Accommodation(**a) for a in ACCOMMODATIONS)
        db.add_all(Restaurant(**r) for r in RESTAURANTS)
        print(
            f"Created {len(SPOTS)} spots, {len(ACCOMMODATIONS)} accommodations, "
            f"{len(RESTAURANTS)} restaurants"
        )

        await db.commit()
        print("Seed complete.")


async def main():
    await init_db()
    await seed()


if __name__ == "__main__":
    asyncio.run(main())
