import logging

from farmhand.account.model import Account, Role
from farmhand.config import Config, config as default_config
from farmhand.errors import InvalidLoginError

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, config: Config = None):
        self.config = config or default_config

    def _credentials(self) -> list[tuple[str, str, Account]]:
        """Known accounts with their passwords, checked in order."""
        cfg = self.config
        return [
            (
                cfg.admin_username,
                cfg.admin_password,
                Account(cfg.admin_username, "Administrator", Role.ADMIN),
            ),
            (
                cfg.farmer_username,
                cfg.farmer_password,
                Account(cfg.farmer_username, "Farmer John", Role.FARMER),
            ),
        ]

    def authenticate(self, username: str, password: str) -> Account:
        """
        Match a username/password pair against the configured accounts.

        Raises InvalidLoginError if no account matches.
        """
        username = (username or "").strip()
        for known_username, known_password, account in self._credentials():
            if username == known_username and password == known_password:
                logger.info("User %s logged in as %s", username, account.role.value)
                return account

        logger.warning("Failed login attempt for user %r", username)
        raise InvalidLoginError("Invalid username or password.")
