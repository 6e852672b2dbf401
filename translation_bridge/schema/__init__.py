"""Component tree model and framework enumeration."""

from .models import Category, Component
from .frameworks import Framework

__all__ = ["Category", "Component", "Framework"]
