from fastapi import APIRouter

from cuesheet.api.routes.auth import router as auth_router
from cuesheet.api.routes.programs import router as programs_router
from cuesheet.api.routes.songs import router as songs_router
from cuesheet.api.routes.special import router as special_router
from cuesheet.api.routes.users import router as users_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(programs_router)
router.include_router(special_router)
router.include_router(songs_router)
