# Core module exports
from rulecheck.core.config import settings, get_settings
from rulecheck.core.logging import (
    configure_logging,
    get_logger,
    bound_context,
    generate_run_id,
    validator_logger,
    rules_logger,
)
