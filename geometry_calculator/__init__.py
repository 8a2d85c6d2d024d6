"""Interactive area, perimeter and power calculator."""
