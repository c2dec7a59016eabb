"""
Agency (business name) verification endpoints.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger

from cacverify.models.verification import VerifyAgencyRequest
from cacverify.core.exceptions import BusinessNameValidationError
from cacverify.core.verification import BusinessVerifier
from cacverify.api.dependencies import get_verifier

router = APIRouter(prefix="/api", tags=["verification"])


async def _read_agency_request(request: Request) -> VerifyAgencyRequest:
    """Parse the body leniently; anything unusable counts as a missing name."""
    try:
        return VerifyAgencyRequest.model_validate(await request.json())
    except ValueError as e:
        logger.debug(f"Unusable verify-agency body: {e}")
        return VerifyAgencyRequest()


@router.post("/verify-agency")
async def verify_agency(
    request: Request,
    verifier: BusinessVerifier = Depends(get_verifier)
):
    """
    Verify an agency/business name against the CAC registry.
    
    A name that is not found is still a successful verification attempt
    and is answered with HTTP 200. A missing body, a body that is not a
    JSON object, or a non-string ``agency_name`` is answered with 400.
    
    Args:
        request: Incoming request; the JSON body carries ``agency_name``
        verifier: Business verifier instance
        
    Returns:
        Verification result JSON
    """
    payload = await _read_agency_request(request)
    try:
        result = await verifier.verify(payload.agency_name or "")
    except BusinessNameValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"status": "error", "message": str(e)}
        )
    except Exception:
        logger.exception("Error handling verify-agency request")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Internal server error during verification"}
        )
    
    return JSONResponse(content=result.to_payload())
