# storefront/repos/user_repo.py
from typing import List

from pydantic import TypeAdapter

from storefront.domain.schemas import UserAccount
from storefront.repos.base import JsonRepo

CURRENT_USER_KEY = "user"
USERS_KEY = "users"

_user = TypeAdapter(UserAccount)
_users = TypeAdapter(List[UserAccount])


class UserRepo(JsonRepo):
    """
    "user" - zalogowane konto sesji
    "users" - katalog kont (mock bazy)
    """

    #zalogowany uzytkownik
    def get_current(self) -> UserAccount | None:
        return self.read(CURRENT_USER_KEY, _user)

    def set_current(self, user: UserAccount) -> None:
        self.write(CURRENT_USER_KEY, user, _user)

    def clear_current(self) -> None:
        self.delete(CURRENT_USER_KEY)

    #katalog kont
    def list_users(self) -> List[UserAccount]:
        return self.read(USERS_KEY, _users) or []

    def find_by_email(self, email: str) -> UserAccount | None:
        return next((u for u in self.list_users() if u.email == email), None)

    def create_user(self, user: UserAccount) -> UserAccount:
        users = self.list_users()
        users.append(user)
        self.write(USERS_KEY, users, _users)
        return user

    def update_user(self, user: UserAccount) -> UserAccount:
        users = [user if u.id == user.id else u for u in self.list_users()]
        self.write(USERS_KEY, users, _users)
        return user
