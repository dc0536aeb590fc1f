from typing import AsyncIterator, Iterator, Optional

from .._utils import RequestOptions, RequestSpec
from .._utils._pagination import paginate, paginate_async
from .._utils.constants import DEFAULT_PAGE_SIZE
from ..models import Page, User
from ._base_service import BaseService, Payload


class UsersService(BaseService):
    """Service for the agents and admins of the helpdesk account."""

    def list(
        self,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        order_by: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[User]:
        """List one page of users.

        Args:
            limit: Page size.
            cursor: Cursor of the page to fetch.
            order_by: Sort expression.
            options: Per-call overrides.

        Returns:
            Page[User]: The requested page.
        """
        spec = self._list_spec(limit, cursor, order_by, options)
        return self._parse(Page[User], self.request(spec, options))

    async def list_async(
        self,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        order_by: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[User]:
        spec = self._list_spec(limit, cursor, order_by, options)
        return self._parse(Page[User], await self.request_async(spec, options))

    def list_all(
        self,
        *,
        order_by: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> Iterator[User]:
        return paginate(
            lambda cursor, limit: self.list(
                order_by=order_by, cursor=cursor, limit=limit, options=options
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def list_all_async(
        self,
        *,
        order_by: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> AsyncIterator[User]:
        return paginate_async(
            lambda cursor, limit: self.list_async(
                order_by=order_by, cursor=cursor, limit=limit, options=options
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def retrieve(self, user_id: int, *, options: Optional[RequestOptions] = None) -> User:
        """Retrieve a user by id."""
        spec = self._retrieve_spec(user_id, options)
        return self._parse(User, self.request(spec, options))

    async def retrieve_async(
        self, user_id: int, *, options: Optional[RequestOptions] = None
    ) -> User:
        spec = self._retrieve_spec(user_id, options)
        return self._parse(User, await self.request_async(spec, options))

    def create(self, data: Payload, *, options: Optional[RequestOptions] = None) -> User:
        """Invite a new user.

        Args:
            data: A :class:`UserCreate` or an equivalent mapping.
            options: Per-call overrides.

        Returns:
            User: The created user.
        """
        spec = self._spec("POST", "users", json=self._payload(data), options=options)
        return self._parse(User, self.request(spec, options))

    async def create_async(
        self, data: Payload, *, options: Optional[RequestOptions] = None
    ) -> User:
        spec = self._spec("POST", "users", json=self._payload(data), options=options)
        return self._parse(User, await self.request_async(spec, options))

    def update(
        self,
        user_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> User:
        spec = self._update_spec(user_id, data, options)
        return self._parse(User, self.request(spec, options))

    async def update_async(
        self,
        user_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> User:
        spec = self._update_spec(user_id, data, options)
        return self._parse(User, await self.request_async(spec, options))

    def delete(self, user_id: int, *, options: Optional[RequestOptions] = None) -> None:
        self.request(self._delete_spec(user_id, options), options)

    async def delete_async(
        self, user_id: int, *, options: Optional[RequestOptions] = None
    ) -> None:
        await self.request_async(self._delete_spec(user_id, options), options)

    def _list_spec(
        self,
        limit: Optional[int],
        cursor: Optional[str],
        order_by: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        return self._spec(
            "GET",
            "users",
            params={"limit": limit, "cursor": cursor, "order_by": order_by},
            options=options,
        )

    def _retrieve_spec(
        self, user_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(user_id, "user")
        return self._spec("GET", f"users/{user_id}", options=options)

    def _update_spec(
        self, user_id: int, data: Payload, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(user_id, "user")
        return self._spec(
            "PUT", f"users/{user_id}", json=self._payload(data), options=options
        )

    def _delete_spec(
        self, user_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(user_id, "user")
        return self._spec("DELETE", f"users/{user_id}", options=options)
