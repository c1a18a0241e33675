"""Static Albay province data — legislative districts and catalog vocabularies."""

# Legislative districts → component municipalities/cities
DISTRICT_MUNICIPALITIES: dict[str, list[str]] = {
    "District 1": ["Bacacay", "Malilipot", "Malinao", "Santo Domingo", "Tiwi", "Tabaco"],
    "District 2": ["Legazpi", "Camalig", "Daraga", "Manito", "Rapu-Rapu"],
    "District 3": ["Guinobatan", "Ligao", "Oas", "Pio Duran", "Polangui", "Jovellar"],
}

DISTRICT_SUBTITLES: dict[str, str] = {
    "District 1": "Coastal Wonders",
    "District 2": "Central Adventure",
    "District 3": "Countryside Escapes",
}

# Categories offered by the itinerary builder
ITINERARY_CATEGORIES: list[dict] = [
    {"name": "Nature", "icon": "🌳", "description": "Mountains, lakes, and natural wonders"},
    {"name": "Culture", "icon": "🏯", "description": "Churches, museums, and heritage sites"},
    {"name": "Adventure", "icon": "🧗", "description": "Thrilling outdoor activities"},
    {"name": "Food", "icon": "🍜", "description": "Local cuisine and restaurants"},
]

# Tags admins may attach to tourist spots
SPOT_CATEGORIES: list[str] = [
    "Nature", "Culture", "Adventure", "Food", "Beach", "Heritage", "Cafes", "ATV Rides",
    "Caving", "Hiking", "Churches", "Crafts", "Festivals", "Island Hopping", "Lakes",
    "Local Cuisine", "Museums", "Parks", "Resorts", "Waterfalls", "Snorkeling",
    "Street Food", "Sunset Views", "Volcanoes", "Ziplines",
]

ACCOMMODATION_CATEGORIES: list[str] = [
    "Luxury", "Mid-range", "Budget", "Resort", "Boutique", "Beach Resort", "Business Hotel",
]


def municipalities_for(districts: list[str] | None) -> list[str]:
    """Flatten the municipalities of the given districts; unknown names are ignored."""
    municipalities: list[str] = []
    for district in districts or []:
        municipalities.extend(DISTRICT_MUNICIPALITIES.get(district, []))
    return municipalities


def in_districts(municipality: str | None, districts: list[str] | None) -> bool:
    """True when the municipality belongs to any of the districts (substring match)."""
    if not municipality:
        return False
    return any(m in municipality for m in municipalities_for(districts))
