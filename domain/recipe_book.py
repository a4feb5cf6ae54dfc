import copy
from enum import Enum
import logging
from typing import Callable

from config import Config, is_configured
from domain.auth import AuthEvent, Session
from domain.backend import Backend
from domain.cache import QueryCache
from domain.errors import (
    BackendUnavailable,
    InvalidRequest,
    ScanChefError,
    Unauthenticated,
)
from domain.fallback import fallback_recipes
from domain.models import Ingredient, Recipe, RecipeDraft, User
from domain.services import request_recipes, with_fallback


logger = logging.getLogger(__name__)


INGREDIENTS = "ingredients"
RECIPES = "recipes"


class Level(Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Notice:
    """Something the user should be told about, e.g. as a toast."""

    def __init__(self, level: Level, message: str) -> None:
        self.level = level
        self.message = message

    def __repr__(self) -> str:
        return f"<Notice({self.level.value}: {self.message})>"


def log_notice(notice: Notice) -> None:
    logger.info("%s: %s", notice.level.value, notice.message)


class SessionView:
    def __init__(self, *, user: User | None = None, loading: bool = True) -> None:
        self.user = user
        self.loading = loading

    def __repr__(self) -> str:
        return f"<SessionView(user={self.user}, loading={self.loading})>"


class RecipeBook:
    """Gets recipes from ingredients and looks after the ones users save.

    Generation never fails from the caller's point of view: without a backend,
    or when the generation function misbehaves, the example recipes are
    returned instead. Reads and writes of saved data raise.
    """

    def __init__(
        self,
        config: Config,
        backend: Backend | None = None,
        *,
        cache: QueryCache | None = None,
        notify: Callable[[Notice], None] = log_notice,
    ) -> None:
        self.configured = is_configured(config)
        if self.configured and backend is None:
            raise ValueError("A configured recipe book needs a backend.")
        self.backend = backend
        self.cache = QueryCache() if cache is None else cache
        self.notify = notify
        self.session = SessionView()
        self._unsubscribe: Callable[[], None] | None = None

    async def start(self) -> None:
        """Load the current user and follow session changes."""
        if not self.configured or self.backend is None:
            self.session = SessionView(user=None, loading=False)
            return

        self._unsubscribe = self.backend.auth.on_auth_state_change(
            self._on_auth_change
        )
        user = await self.backend.auth.get_user()
        self.session = SessionView(user=user, loading=False)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_auth_change(self, event: AuthEvent, session: Session | None) -> None:
        self.session = SessionView(
            user=None if session is None else session.user,
            loading=False,
        )
        if event == AuthEvent.SIGNED_IN:
            self.cache.invalidate(INGREDIENTS)
            self.cache.invalidate(RECIPES)

    def _backend(self, action: str) -> Backend:
        if not self.configured or self.backend is None:
            self.notify(Notice(Level.ERROR, f"Cannot {action}: backend not configured."))
            raise BackendUnavailable(f"Cannot {action} without a configured backend.")
        return self.backend

    async def current_user(self) -> User | None:
        if not self.configured or self.backend is None:
            return None
        return await self.backend.auth.get_user()

    async def _signed_in(self, backend: Backend, action: str) -> User:
        user = await backend.auth.get_user()
        if user is None:
            self.notify(Notice(Level.ERROR, f"Sign in to {action}."))
            raise Unauthenticated(f"Cannot {action} without a signed in user.")
        return user

    async def sign_out(self) -> None:
        await self._backend("sign out").auth.sign_out()

    async def list_recipes(self) -> list[Recipe]:
        backend = self._backend("load recipes")
        user = await backend.auth.get_user()
        if user is None:
            return []
        try:
            recipes = await self.cache.fetch(
                (RECIPES, user.id),
                lambda: backend.records.list_recipes(user.id),
            )
        except ScanChefError:
            self.notify(Notice(Level.ERROR, "Failed to load recipes"))
            raise
        return copy.deepcopy(recipes)

    async def list_ingredients(self) -> list[Ingredient]:
        backend = self._backend("load ingredients")
        user = await backend.auth.get_user()
        if user is None:
            return []
        try:
            ingredients = await self.cache.fetch(
                (INGREDIENTS, user.id),
                lambda: backend.records.list_ingredients(user.id),
            )
        except ScanChefError:
            self.notify(Notice(Level.ERROR, "Failed to load ingredients"))
            raise
        return copy.deepcopy(ingredients)

    async def add_ingredients(self, names: list[str]) -> list[Ingredient]:
        backend = self._backend("add ingredients")
        user = await self._signed_in(backend, "add ingredients")
        try:
            ingredients = await backend.records.add_ingredients(list(names), user.id)
        except ScanChefError:
            self.notify(Notice(Level.ERROR, "Failed to add ingredients"))
            raise
        self.cache.invalidate(INGREDIENTS)
        return ingredients

    async def save_recipe(self, recipe: RecipeDraft) -> Recipe:
        backend = self._backend("save recipes")
        user = await self._signed_in(backend, "save recipes")
        try:
            recipe = RecipeDraft.from_dict(recipe.to_dict())
        except ValueError as e:
            self.notify(Notice(Level.ERROR, "Failed to save recipe"))
            raise InvalidRequest(str(e)) from e
        try:
            saved = await backend.records.add_recipe(recipe, user.id)
        except ScanChefError:
            self.notify(Notice(Level.ERROR, "Failed to save recipe"))
            raise
        self.cache.invalidate(RECIPES)
        self.notify(Notice(Level.SUCCESS, "Recipe saved successfully!"))
        return saved

    async def generate_recipes(self, ingredients: list[str]) -> list[RecipeDraft]:
        if not ingredients:
            return []

        if not self.configured or self.backend is None:
            self.notify(
                Notice(Level.INFO, "Backend not configured, showing example recipes.")
            )
            return fallback_recipes()

        backend = self.backend
        session = backend.auth.session

        def generation_failed(e: Exception) -> None:
            self.notify(
                Notice(Level.WARNING, "Could not generate recipes, showing examples.")
            )

        return await with_fallback(
            lambda: request_recipes(
                list(ingredients),
                functions=backend.functions,
                access_token=None if session is None else session.access_token,
            ),
            fallback_recipes(),
            on_error=generation_failed,
        )
