from fastapi import FastAPI

from teamscope.api import health
from teamscope.api.v1.endpoints import teams
from teamscope.core.config import settings
from teamscope.core.init_db import init_db
from teamscope.core.metrics import PrometheusMiddleware, metrics_endpoint
from teamscope.db.mongodb import close_mongo_connection, connect_to_mongo

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
    Teamscope API for team-scoped visibility and role-based access control.

    ## Features
    * **Team Visibility**: Members see their teams; the global hidden team is never addressable.
    * **Role Hierarchy**: viewer < contributor < owner gates team actions.
    * **Scoped Search**: Typeahead over addable users and name search over the user's own teams.

    """,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
)

app.add_middleware(PrometheusMiddleware)


@app.on_event("startup")
async def startup_event():
    await connect_to_mongo()
    await init_db()


@app.on_event("shutdown")
async def shutdown_event():
    await close_mongo_connection()


app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(teams.router, prefix=f"{settings.API_V1_STR}/teams", tags=["teams"])
app.add_route("/metrics", metrics_endpoint, include_in_schema=False)


@app.get("/")
async def root():
    return {"message": "Welcome to Teamscope API"}
