"""Export service — PDF and CSV downloads of saved itineraries."""

import csv
import io
import logging
from datetime import date
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from wanderer.models.itinerary import Itinerary

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["day", "start_time", "end_time", "name", "location", "description"]


def _schedule(itinerary: Itinerary) -> list[dict]:
    return list((itinerary.route or {}).get("schedule") or [])


def _unscheduled_items(itinerary: Itinerary) -> list[dict]:
    """Saved items that have no slot in the schedule (added from the feed)."""
    scheduled_ids = {entry.get("spotId") for entry in _schedule(itinerary)}
    return [item for item in (itinerary.spots or []) if item.get("id") not in scheduled_ids]


class ExportService:
    """Generates itinerary PDFs and CSVs."""

    def generate_itinerary_pdf(self, itinerary: Itinerary, traveler_name: str | None = None) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(buf, pagesize=letter, topMargin=0.5 * inch)
        styles = getSampleStyleSheet()
        elements = []

        elements.append(Paragraph(escape(itinerary.name or "My Itinerary"), styles["Title"]))
        elements.append(Spacer(1, 12))

        schedule = _schedule(itinerary)
        info = [
            f"<b>Traveler:</b> {escape(traveler_name or 'Guest')}",
            f"<b>Interests:</b> {escape(', '.join(itinerary.selected_categories or [])) or 'N/A'}",
            f"<b>Duration:</b> {(itinerary.route or {}).get('total_days', 0)} day(s)",
            f"<b>Generated:</b> {date.today().isoformat()}",
        ]
        for line in info:
            elements.append(Paragraph(line, styles["Normal"]))
        elements.append(Spacer(1, 12))

        if schedule:
            elements.append(Paragraph("<b>Schedule</b>", styles["Heading2"]))
            rows = [["Day", "Time", "Spot", "Location"]]
            for entry in schedule:
                rows.append([
                    f"Day {entry.get('day')}",
                    f"{entry.get('startTime')} - {entry.get('endTime')}",
                    Paragraph(escape(entry.get("spotName") or ""), styles["Normal"]),
                    Paragraph(escape(entry.get("location") or ""), styles["Normal"]),
                ])
            table = Table(rows, colWidths=[0.7 * inch, 1.6 * inch, 2.2 * inch, 2.0 * inch])
            table.setStyle(TableStyle([
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#0F766E")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ]))
            elements.append(table)
            elements.append(Spacer(1, 12))

        extras = _unscheduled_items(itinerary)
        if extras:
            elements.append(Paragraph("<b>Saved places</b>", styles["Heading2"]))
            rows = [["Name", "Type", "Location"]]
            for item in extras:
                rows.append([
                    Paragraph(escape(item.get("name") or ""), styles["Normal"]),
                    item.get("type") or "spot",
                    Paragraph(escape(item.get("location") or ""), styles["Normal"]),
                ])
            table = Table(rows, colWidths=[2.6 * inch, 1.2 * inch, 2.7 * inch])
            table.setStyle(TableStyle([
                ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ]))
            elements.append(table)

        if not schedule and not extras:
            elements.append(Paragraph("This itinerary has no places yet.", styles["Normal"]))

        doc.build(elements)
        logger.info(f"Rendered PDF for itinerary {itinerary.id}")
        return buf.getvalue()

    def generate_itinerary_csv(self, itinerary: Itinerary) -> str:
        """One row per scheduled activity, then unscheduled items with empty day/time."""
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for entry in _schedule(itinerary):
            writer.writerow({
                "day": entry.get("day"),
                "start_time": entry.get("startTime"),
                "end_time": entry.get("endTime"),
                "name": entry.get("spotName"),
                "location": entry.get("location"),
                "description": entry.get("description") or "",
            })
        for item in _unscheduled_items(itinerary):
            writer.writerow({
                "day": "",
                "start_time": "",
                "end_time": "",
                "name": item.get("name"),
                "location": item.get("location"),
                "description": item.get("description") or "",
            })
        return buf.getvalue()


export_service = ExportService()
