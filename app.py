import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from linkedin_voyager_pkg.browser import voyager_session
from linkedin_voyager_pkg.errors import InvalidArgumentError, VoyagerError
from linkedin_voyager_pkg.models import CompanyRequest, ProfileRequest, SalesNavRequest
from linkedin_voyager_pkg.response import build_error, build_response
from linkedin_voyager_pkg.scraper_logging import configure_logging
from linkedin_voyager_pkg.utils import get_public_identifier
from linkedin_voyager_pkg.voyager import VoyagerClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    async with voyager_session() as client:
        app.state.client = client
        yield


app = FastAPI(lifespan=lifespan)


def get_client(request: Request) -> VoyagerClient:
    return request.app.state.client


@app.post("/scrape/profile")
async def scrape_profile(data: ProfileRequest, client: VoyagerClient = Depends(get_client)):
    public_identifier = data.public_identifier or get_public_identifier(data.url or "")
    try:
        profile = await client.get_full_profile(public_identifier)
    except InvalidArgumentError as e:
        return JSONResponse(status_code=400, content=build_error("profile", public_identifier or data.url, str(e)))
    return build_response("profile", public_identifier, profile)


@app.post("/scrape/company")
async def scrape_company(data: CompanyRequest, client: VoyagerClient = Depends(get_client)):
    if not data.universal_name.strip():
        return JSONResponse(
            status_code=400,
            content=build_error("company", data.universal_name, "a universal name is required"),
        )
    company = await client.get_company(data.universal_name.strip())
    return build_response("company", data.universal_name, company)


@app.post("/scrape/sales-nav")
async def scrape_sales_nav(data: SalesNavRequest, client: VoyagerClient = Depends(get_client)):
    try:
        profile = await client.scrape_sales_nav_full_profile(data.url)
    except InvalidArgumentError as e:
        return JSONResponse(status_code=400, content=build_error("profile", data.url, str(e)))
    except VoyagerError as e:
        logger.error("Sales Navigator scrape failed for %s: %s", data.url, e)
        return JSONResponse(status_code=502, content=build_error("profile", data.url, str(e)))
    return build_response("profile", data.url, profile)


@app.get("/health")
def health(): return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8787)
