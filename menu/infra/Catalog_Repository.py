"""Catalog repository: loads the master menu (JSON file) into MenuItem objects."""
import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from menu.domain.MenuItem import MenuItem
from menu.utilities import config

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """The master menu cannot be used to build a plan."""


class CatalogUnavailableError(CatalogError):
    """The master menu file is missing, unreadable or malformed."""


class EmptyCatalogError(CatalogError):
    """The master menu file holds no items."""


def load_menu_items(path: Optional[Union[str, Path]] = None) -> List[MenuItem]:
    """Read the master menu JSON array and return validated MenuItem objects.

    Raises CatalogUnavailableError or EmptyCatalogError; nothing is retried.
    """
    menu_path = Path(path) if path is not None else config.MENU_FILE
    try:
        with open(menu_path, 'r', encoding='utf-8') as f:
            menu_data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Menu file not found: {menu_path}")
        raise CatalogUnavailableError(f"failed to read menu file {menu_path}: file not found") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in menu file {menu_path}: {e}")
        raise CatalogUnavailableError(f"failed to parse JSON from {menu_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading menu file {menu_path}: {e}")
        raise CatalogUnavailableError(f"failed to read menu file {menu_path}: {e}") from e

    if not isinstance(menu_data, list):
        logger.error(f"Menu file {menu_path} must contain a JSON array")
        raise CatalogUnavailableError(f"menu file {menu_path} must contain a JSON array of items")

    items = []
    for index, entry in enumerate(menu_data):
        try:
            items.append(MenuItem.from_dict(entry))
        except ValidationError as e:
            logger.error(f"Invalid menu item #{index} in {menu_path}: {e}")
            raise CatalogUnavailableError(f"invalid menu item #{index} in {menu_path}: {e}") from e

    if not items:
        raise EmptyCatalogError("Master menu is empty or could not be loaded.")
    logger.info(f"Loaded {len(items)} menu items from {menu_path}")
    return items
