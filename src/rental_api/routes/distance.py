"""Distance endpoint for annotating listings with proximity."""

from fastapi import APIRouter

from rental_api.models.geo import DistanceRequest, DistanceResponse
from rental_calendar.services.geo import distance_between_records, distance_label

router = APIRouter(tags=["distance"])


@router.post(
    "/distance",
    summary="Distance between two records",
    description="""
Great-circle distance in miles between two raw records.

Missing or out-of-range coordinates yield `miles: null` and the label
"Distance unavailable"; this is never an error.
""",
    response_model=DistanceResponse,
)
async def get_distance(request: DistanceRequest) -> DistanceResponse:
    """Measure the distance between origin and destination."""
    miles = distance_between_records(request.origin, request.destination)
    return DistanceResponse(miles=miles, label=distance_label(miles))
