from .districts import DISPLAY_NAMES, DISTRICT_ADJACENCY, DISTRICT_ALIASES, get_adjacency

__all__ = ["DISPLAY_NAMES", "DISTRICT_ADJACENCY", "DISTRICT_ALIASES", "get_adjacency"]
