import csv
import io

from wanderer.models.itinerary import Itinerary
from wanderer.services.export_service import export_service


def _itinerary() -> Itinerary:
    return Itinerary(
        name="Weekend in Albay",
        selected_categories=["Nature"],
        spots=[
            {"id": "s1", "name": "Mayon Volcano", "location": "Legazpi City", "description": None, "type": "spot"},
            {"id": "r1", "name": "1st Colonial Grill", "location": "Legazpi City", "description": "Sili ice cream",
             "type": "restaurant"},
        ],
        route={
            "total_days": 1,
            "schedule": [{
                "day": 1, "spotId": "s1", "spotName": "Mayon Volcano", "description": None,
                "location": "Legazpi City", "startTime": "09:00 AM", "endTime": "12:00 PM",
            }],
        },
    )


def test_csv_lists_scheduled_then_saved_items():
    rows = list(csv.DictReader(io.StringIO(export_service.generate_itinerary_csv(_itinerary()))))
    assert rows[0] == {
        "day": "1", "start_time": "09:00 AM", "end_time": "12:00 PM",
        "name": "Mayon Volcano", "location": "Legazpi City", "description": "",
    }
    assert rows[1]["name"] == "1st Colonial Grill"
    assert rows[1]["day"] == ""
    assert len(rows) == 2


def test_csv_without_route():
    itinerary = Itinerary(name="Empty", spots=[], route=None)
    assert export_service.generate_itinerary_csv(itinerary).strip() == (
        "day,start_time,end_time,name,location,description"
    )


def test_pdf_renders():
    pdf = export_service.generate_itinerary_pdf(_itinerary(), traveler_name="Maria Santos")
    assert pdf.startswith(b"%PDF")

    empty = export_service.generate_itinerary_pdf(Itinerary(name="Empty", spots=[], route=None))
    assert empty.startswith(b"%PDF")
