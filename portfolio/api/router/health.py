from fastapi import APIRouter, status, Depends

from portfolio.core import Datastore, get_datastore

health_check = APIRouter()


@health_check.get("/ping", tags=["Health check"], status_code=status.HTTP_200_OK)
async def ping(datastore: Datastore = Depends(get_datastore)):
    """health check endpoint for MongoDB"""
    db_status = "reachable" if await datastore.ping() else "unreachable"
    return {"message": "pong", "database": db_status}
