"""
BDD Steps Import Module

Consolidates all Gherkin step definitions (Given/When/Then).
This module is imported by conftest.py to register all BDD steps with pytest-bdd.
"""

from test.service.reservation.integration.steps.waitlist.fixtures import *  # noqa: E402, F403
from test.service.reservation.integration.steps.waitlist.given import *  # noqa: E402, F403
from test.service.reservation.integration.steps.waitlist.then import *  # noqa: E402, F403
from test.service.reservation.integration.steps.waitlist.when import *  # noqa: E402, F403
