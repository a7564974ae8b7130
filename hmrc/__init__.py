"""HMRC sandbox Create Test User client package.

To create test users:
    from hmrc.core import HmrcClient, HmrcAuth, CreateTestUserService

To load configuration from the environment:
    from hmrc.config import load_settings
"""

__version__ = "0.1.0"
