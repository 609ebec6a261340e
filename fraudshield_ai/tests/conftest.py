import pytest
from fastapi.testclient import TestClient

from fraudshield_ai.api.server import app
from fraudshield_ai.api.security import rate_limiter
from fraudshield_ai.services.scoring_engine import ScoringEngine
from fraudshield_ai.utils.logging_config import metrics


@pytest.fixture
def client():
    """FastAPI test client fixture."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_state():
    """Rate limiter and metrics are process-global."""
    rate_limiter.reset()
    metrics.reset()
    yield
    rate_limiter.reset()
    metrics.reset()


@pytest.fixture
def engine():
    """Engine with the production taxonomy."""
    return ScoringEngine()


@pytest.fixture
def sample_safe_text():
    """Sample safe message for testing."""
    return "Hi! Just wanted to let you know I'll be home late today. Don't wait for dinner. See you soon!"


@pytest.fixture
def sample_phishing_text():
    """Sample account-verification phishing message."""
    return (
        "Your bank account has been temporarily locked due to suspicious activity. "
        "Please verify your account details by clicking this link: http://verify-account-now.xyz"
    )


@pytest.fixture
def sample_scam_text():
    """Sample lottery scam message for testing."""
    return (
        "CONGRATULATIONS!!! You have WON $1,000,000 in our lottery! To claim your prize, "
        "send $500 processing fee IMMEDIATELY to account 1234567890. URGENT - Offer expires "
        "in 24 hours! Click here NOW: http://claim-prize-winner.com"
    )
