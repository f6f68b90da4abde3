from fastapi import APIRouter, HTTPException

from menu.infra.Catalog_Repository import load_menu_items, CatalogError
from menu.logic.planning.week_planner import categorize_menu

router = APIRouter()


@router.get("/api/menu")
def list_menu():
    """Return the master menu grouped by category, with per-category counts."""
    try:
        items = load_menu_items()
    except CatalogError as e:
        raise HTTPException(status_code=500, detail=f"Unable to load menu file: {e}")
    categorized = categorize_menu(items)
    counts = {category: len(group) for category, group in categorized.items()}
    return {
        "total": len(items),
        "counts": counts,
        "categories": {
            category: [item.to_dict() for item in group]
            for category, group in categorized.items()
        },
    }
