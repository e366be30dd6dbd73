from nftrarity.api.health import router as health_router
from nftrarity.api.rarity import router as rarity_router

__all__ = [
    "health_router",
    "rarity_router",
]
