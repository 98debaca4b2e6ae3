"""Tests for users module interface."""

from modules.users.interfaces import IUserService
from modules.users.service import UserService


METHODS = [
    "create_user",
    "get_user",
    "get_user_by_username",
    "require_owner",
    "seed_demo_user",
]


class TestUserInterface:
    def test_interface_methods_exist(self):
        """IUserService should define required methods."""
        for method in METHODS:
            assert hasattr(IUserService, method)

    def test_service_has_interface_methods(self):
        """UserService should have all IUserService methods."""
        for method in METHODS:
            assert callable(getattr(UserService, method))

    def test_service_instance_satisfies_protocol(self, user_service):
        """IUserService is runtime checkable."""
        assert isinstance(user_service, IUserService)
