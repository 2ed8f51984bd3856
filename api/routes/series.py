"""
Synthetic series route for demos and smoke testing.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.requests import SyntheticRequest
from api.responses import SyntheticSeries
from api.routes.exception import handle_exceptions
from services import forecast_service

router = APIRouter(tags=["Series"])


@router.post("/series/synthetic", summary="Generate a random or pure-logistic series")
@handle_exceptions
async def synthetic_series(req: SyntheticRequest) -> SyntheticSeries:
    return forecast_service.generate_series(req)
