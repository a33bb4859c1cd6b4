"""
Test configuration and fixtures
"""

import boto3
import pytest
import pytest_asyncio
from botocore.config import Config
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.api.deps import get_upload_service
from app.core.database import get_database
from app.main import app
from app.services.upload_service import UploadService


TEST_BUCKET = "keycatalog-test"


@pytest.fixture
def mongo_db():
    """In-memory database, fresh for every test"""
    client = AsyncMongoMockClient()
    return client["keycatalog_test"]


@pytest.fixture
def s3_client():
    """
    Real boto3 client with dummy credentials.
    Presigned POSTs are signed locally, so no request ever leaves the process.
    """
    return boto3.client(
        "s3",
        region_name="ap-southeast-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        config=Config(signature_version="s3v4"),
    )


@pytest.fixture
def upload_service(s3_client):
    return UploadService(client=s3_client, bucket_name=TEST_BUCKET)


@pytest_asyncio.fixture
async def client(mongo_db, upload_service):
    """Create test client with database and storage overrides"""

    async def get_test_database():
        return mongo_db

    app.dependency_overrides[get_database] = get_test_database
    app.dependency_overrides[get_upload_service] = lambda: upload_service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_brand():
    """Sample brand payload"""
    return {
        "name": "Toyota",
        "logoUrl": "https://keycatalog-test.s3.ap-southeast-2.amazonaws.com/logos/toyota-1.png",
    }


@pytest.fixture
def sample_model():
    """Sample model payload"""
    return {
        "name": "corolla",
        "imageUrl": "https://keycatalog-test.s3.ap-southeast-2.amazonaws.com/models/corolla.png",
        "description": "Compact sedan",
    }


@pytest.fixture
def sample_variant():
    """Sample variant payload"""
    return {
        "name": "Corolla 2018-2022",
        "rkid": "RK-1042",
        "imageUrl": "https://keycatalog-test.s3.ap-southeast-2.amazonaws.com/variants/corolla.png",
        "images": {"car": "https://keycatalog-test.s3.ap-southeast-2.amazonaws.com/variants/corolla.png"},
        "vehicleInfo": {
            "make": "Toyota",
            "model": "Corolla",
            "series": "E210",
            "yearRange": "2018-2022",
            "keyType": "Smart key",
            "remoteFrequency": "433 MHz",
            "transponderChip": ["Texas 8A"],
            "transponderChipLinks": ["https://example.com/chips/8a"],
            "KingParts": ["KP-TOY-48"],
            "KingPartsLinks": ["https://example.com/parts/kp-toy-48"],
            "Lishi": "TOY48",
            "LishiLink": "https://example.com/lishi/toy48",
        },
        "keyBladeProfiles": {"TOY48": {"refNo": "X217", "link": "https://example.com/blades/toy48"}},
        "programmingInfo": {
            "allKeysLost": [{"name": "OBD", "Color": "green", "models": ["Autel IM608"]}],
        },
        "pathways": [{"name": "Smart key AKL", "path": "Toyota > Smart key > AKL"}],
        "resources": {
            "quickReference": {"emergencyStart": "Hold fob to start button", "obdPortLocation": "Under dash, left"},
            "videos": [{"title": "AKL walkthrough", "embedId": "dQw4w9WgXcQ"}],
            "documents": [{"title": "Wiring", "link": "https://example.com/docs/wiring.pdf"}],
        },
    }


@pytest_asyncio.fixture
async def brand(client: AsyncClient, sample_brand):
    response = await client.post("/api/v1/brands", json=sample_brand)
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def car_model(client: AsyncClient, brand, sample_model):
    response = await client.post(f"/api/v1/brands/{brand['id']}/models", json=sample_model)
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def variant(client: AsyncClient, brand, car_model, sample_variant):
    response = await client.post(
        f"/api/v1/brands/{brand['id']}/models/{car_model['id']}/variants",
        json=sample_variant,
    )
    assert response.status_code == 201
    return response.json()
