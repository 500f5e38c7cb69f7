from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase
from .user_lists import UserListUseCase

__all__ = ["LoginUserUseCase", "RegisterUserUseCase", "UserListUseCase"]
