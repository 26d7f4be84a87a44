"""Load and save the favorites set."""
import logging
from typing import Iterable

from sqlalchemy.orm import Session

from toolboard.models import FavoriteTool

logger = logging.getLogger(__name__)


def load_favorites(db: Session) -> frozenset[str]:
    """Read the stored favorite tool ids."""
    rows = db.query(FavoriteTool.tool_id).all()
    return frozenset(row[0] for row in rows)


def save_favorites(db: Session, favorites: Iterable[str]) -> None:
    """
    Replace the stored favorites with ``favorites``.

    Runs as a single commit; removed ids are deleted and new ones added.
    """
    wanted = set(favorites)
    stored = set(load_favorites(db))

    removed = stored - wanted
    if removed:
        db.query(FavoriteTool).filter(
            FavoriteTool.tool_id.in_(removed)
        ).delete(synchronize_session=False)

    for tool_id in sorted(wanted - stored):
        db.add(FavoriteTool(tool_id=tool_id))

    db.commit()
    logger.info(f"Saved favorites: {len(wanted)} tools (+{len(wanted - stored)} / -{len(removed)})")
