"""Token acquisition."""

from pivotal.crud._base import CRUDBase
from pivotal.platform.entities import UserToken
from pivotal.platform.http_client import PivotalHttpClient

ACTIVE_TOKEN_PATH = "/tokens/active"


class CRUDToken(CRUDBase[UserToken]):
    """Reads the active API token of an account."""

    def get_from_credentials(
        self, client: PivotalHttpClient, login: str, password: str
    ) -> UserToken:
        """Exchange a login and password for the account's API token.

        Args:
            client: Transport (its base url should use https)
            login: Account login or email
            password: Account password

        Returns:
            The user's token
        """
        document = client.fetch_with_credentials(ACTIVE_TOKEN_PATH, login, password)
        user = self._from_document(document)
        self.logger.debug(f"Acquired token for user {user.id}")
        return user


# Singleton instance
token = CRUDToken(UserToken)
