from .dashboard import build_rows, temperature_color
from .routes import WebRoutes

__all__ = ['build_rows', 'temperature_color', 'WebRoutes']
