"""FastAPI web server that turns uploaded NMEA tracklogs into routes.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Then post a raw log to ``/route``::

    curl --data-binary @drive.nmea 'http://<host>:8000/route?epsilon=1e-5'

The response is a JSON object with the processing ``summary`` counters, the
deduplicated ``route`` and a Google Maps ``url``.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, Response

from server.formatters import format_route_message
from tracklog.config import SPATIAL_EPSILON_DEGREES, PipelineConfig
from tracklog.pipeline import build_route, normalize_lines

logger = logging.getLogger(__name__)

app = FastAPI(title="tracklog")


@app.post("/route")
async def route_endpoint(request: Request, epsilon: float = SPATIAL_EPSILON_DEGREES) -> Response:
    """Build a route from the NMEA log sent as the request body.

    The body is decoded as UTF-8 with ``surrogateescape`` so undecodable
    bytes still take part in the checksum. Lines are split on "\n" only;
    other control characters stay inside the line they corrupt.

    Args:
        request: The incoming request; its body is the raw log text.
        epsilon: Spatial deduplication threshold in degrees.

    Raises:
        HTTPException: 422 if ``epsilon`` is negative or not a number.
    """
    try:
        config = PipelineConfig(epsilon_degrees=epsilon)
    except ValueError as error:
        raise HTTPException(status_code=422, detail=str(error)) from error

    body = await request.body()
    text = body.decode("utf-8", errors="surrogateescape")
    result = build_route(normalize_lines(text.split("\n")), config)
    logger.info("Built route with %d points from %d lines", len(result.route), result.summary.lines_total)

    return Response(content=format_route_message(result), media_type="application/json")
