from __future__ import annotations

import os

from agency_quote_generator.api import create_app
from agency_quote_generator.logging_config import setup_logging
from agency_quote_generator.quote_store import QuoteStore

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
LOG_LEVEL = os.getenv("LOG_LEVEL")
STRICT_FEATURES = os.getenv("QUOTE_STRICT_FEATURES", "").lower() in {"1", "true", "yes"}

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID, level=LOG_LEVEL)

quote_store = QuoteStore()

app = create_app(store=quote_store, strict_features=STRICT_FEATURES)
