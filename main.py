"""
CAC Business Verification - server entry point.
"""
from cacverify.config.settings import settings
from cacverify.app import app


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "cacverify.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
