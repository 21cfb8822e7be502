from .context import DrawingContext
from .sector_chart import Sector, sector_chart, layout_sectors

__all__ = ["DrawingContext", "Sector", "sector_chart", "layout_sectors"]
