from wanderer.models.user import User
from wanderer.models.catalog import Accommodation, Category, Restaurant, Subcategory, TouristSpot
from wanderer.models.itinerary import Itinerary
from wanderer.models.review import Favorite, Review
from wanderer.models.otp import TempOtp

__all__ = [
    "Accommodation",
    "Category",
    "Favorite",
    "Itinerary",
    "Restaurant",
    "Review",
    "Subcategory",
    "TempOtp",
    "TouristSpot",
    "User",
]
