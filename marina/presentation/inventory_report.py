"""Inventory renderers for the console, CSV, HTML and Excel."""
from __future__ import annotations

import csv
import html
import io
from typing import Iterable

import pandas as pd

from marina.config import SETTINGS
from marina.domain.models import Boat

COLUMNS = ["name", "length_ft", "location_type", "location", "amount_owed"]


def format_inventory_line(boat: Boat, name_width: int = SETTINGS.name_width) -> str:
    return f"{boat.name:<{name_width}} {boat.length:3d}' {boat.location.describe()}   Owes ${boat.amount_owed:7.2f}"


def render_inventory(boats: Iterable[Boat], name_width: int = SETTINGS.name_width) -> str:
    return "\n".join(format_inventory_line(boat, name_width) for boat in boats)


def boats_to_rows(boats: Iterable[Boat]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for boat in boats:
        rows.append(
            {
                "name": boat.name,
                "length_ft": str(boat.length),
                "location_type": boat.kind.name.lower(),
                "location": boat.location.value_text(),
                "amount_owed": f"{boat.amount_owed:.2f}",
            }
        )
    return rows


def boats_to_dataframe(boats: Iterable[Boat]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "name": b.name,
                "length_ft": b.length,
                "location_type": b.kind.name.lower(),
                "location": b.location.value_text(),
                "amount_owed": b.amount_owed,
            }
            for b in boats
        ],
        columns=COLUMNS,
    )


def render_csv(boats: Iterable[Boat]) -> bytes:
    rows = boats_to_rows(boats)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")


def render_html(boats: Iterable[Boat]) -> str:
    rows = boats_to_rows(boats)
    if not rows:
        return "<p>No boats in the marina.</p>"
    header = "".join(f"<th>{col}</th>" for col in COLUMNS)
    body_parts = []
    for row in rows:
        body_parts.append("<tr>" + "".join(f"<td>{html.escape(row[col])}</td>" for col in COLUMNS) + "</tr>")
    body_html = "".join(body_parts)
    return f"<table><thead><tr>{header}</tr></thead><tbody>{body_html}</tbody></table>"


def render_xlsx(boats: Iterable[Boat], sheet_name: str = "Inventory") -> bytes:
    frame = boats_to_dataframe(boats)
    frame["amount_owed"] = frame["amount_owed"].astype(float)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False)
    return buffer.getvalue()
