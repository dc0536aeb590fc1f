from typing import AsyncIterator, Iterator, List, Optional

from .._utils import RequestOptions, RequestSpec
from .._utils._pagination import paginate, paginate_async
from .._utils._validation import validate_non_empty_list
from .._utils.constants import DEFAULT_PAGE_SIZE
from ..models import Customer, Page
from ._base_service import BaseService, Payload


class CustomersService(BaseService):
    """Service for managing helpdesk customers.

    Customers are the people who contact support. They are identified by a
    numeric id and, optionally, by their email address or an ``external_id``
    coming from another system.
    """

    def list(
        self,
        *,
        email: Optional[str] = None,
        external_id: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        order_by: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Customer]:
        """List one page of customers.

        Args:
            email: Only the customer with this email address.
            external_id: Only the customer with this external id.
            limit: Page size.
            cursor: Cursor of the page to fetch, from ``meta.next_cursor``.
            order_by: Sort expression.
            options: Per-call timeout, cancellation, retry and trace overrides.

        Returns:
            Page[Customer]: The requested page.

        Examples:
            ```python
            from gorgias import Gorgias

            client = Gorgias()

            page = client.customers.list(email="jane@example.com")
            customer = page.data[0] if page.data else None
            ```
        """
        spec = self._list_spec(email, external_id, limit, cursor, order_by, options)
        return self._parse(Page[Customer], self.request(spec, options))

    async def list_async(
        self,
        *,
        email: Optional[str] = None,
        external_id: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        order_by: Optional[str] = None,
        options: Optional[RequestOptions] = None,
    ) -> Page[Customer]:
        """Asynchronously list one page of customers."""
        spec = self._list_spec(email, external_id, limit, cursor, order_by, options)
        return self._parse(Page[Customer], await self.request_async(spec, options))

    def list_all(
        self,
        *,
        email: Optional[str] = None,
        external_id: Optional[str] = None,
        order_by: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> Iterator[Customer]:
        """Iterate over every matching customer, page by page."""
        return paginate(
            lambda cursor, limit: self.list(
                email=email,
                external_id=external_id,
                order_by=order_by,
                cursor=cursor,
                limit=limit,
                options=options,
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def list_all_async(
        self,
        *,
        email: Optional[str] = None,
        external_id: Optional[str] = None,
        order_by: Optional[str] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        options: Optional[RequestOptions] = None,
    ) -> AsyncIterator[Customer]:
        return paginate_async(
            lambda cursor, limit: self.list_async(
                email=email,
                external_id=external_id,
                order_by=order_by,
                cursor=cursor,
                limit=limit,
                options=options,
            ),
            page_size,
            options.cancel_token if options else None,
        )

    def retrieve(
        self, customer_id: int, *, options: Optional[RequestOptions] = None
    ) -> Customer:
        """Retrieve a customer by id.

        Args:
            customer_id: Id of the customer.
            options: Per-call overrides.

        Returns:
            Customer: The customer.

        Raises:
            ValidationError: If ``customer_id`` is not a positive integer.
            NotFoundError: If no customer has this id.
        """
        spec = self._retrieve_spec(customer_id, options)
        return self._parse(Customer, self.request(spec, options))

    async def retrieve_async(
        self, customer_id: int, *, options: Optional[RequestOptions] = None
    ) -> Customer:
        spec = self._retrieve_spec(customer_id, options)
        return self._parse(Customer, await self.request_async(spec, options))

    def create(
        self, data: Payload, *, options: Optional[RequestOptions] = None
    ) -> Customer:
        """Create a customer from a :class:`CustomerCreate` or a mapping."""
        spec = self._create_spec(data, options)
        return self._parse(Customer, self.request(spec, options))

    async def create_async(
        self, data: Payload, *, options: Optional[RequestOptions] = None
    ) -> Customer:
        spec = self._create_spec(data, options)
        return self._parse(Customer, await self.request_async(spec, options))

    def update(
        self,
        customer_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        spec = self._update_spec(customer_id, data, options)
        return self._parse(Customer, self.request(spec, options))

    async def update_async(
        self,
        customer_id: int,
        data: Payload,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        spec = self._update_spec(customer_id, data, options)
        return self._parse(Customer, await self.request_async(spec, options))

    def delete(
        self, customer_id: int, *, options: Optional[RequestOptions] = None
    ) -> None:
        self.request(self._delete_spec(customer_id, options), options)

    async def delete_async(
        self, customer_id: int, *, options: Optional[RequestOptions] = None
    ) -> None:
        await self.request_async(self._delete_spec(customer_id, options), options)

    def delete_many(
        self, customer_ids: List[int], *, options: Optional[RequestOptions] = None
    ) -> None:
        """Delete several customers in a single request.

        Every id is validated before anything is sent, so an invalid id
        deletes nothing.

        Raises:
            ValidationError: If ``customer_ids`` is empty or holds an invalid id.
        """
        self.request(self._delete_many_spec(customer_ids, options), options)

    async def delete_many_async(
        self, customer_ids: List[int], *, options: Optional[RequestOptions] = None
    ) -> None:
        await self.request_async(self._delete_many_spec(customer_ids, options), options)

    def _list_spec(
        self,
        email: Optional[str],
        external_id: Optional[str],
        limit: Optional[int],
        cursor: Optional[str],
        order_by: Optional[str],
        options: Optional[RequestOptions],
    ) -> RequestSpec:
        return self._spec(
            "GET",
            "customers",
            params={
                "email": email,
                "external_id": external_id,
                "limit": limit,
                "cursor": cursor,
                "order_by": order_by,
            },
            options=options,
        )

    def _retrieve_spec(
        self, customer_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(customer_id, "customer")
        return self._spec("GET", f"customers/{customer_id}", options=options)

    def _create_spec(
        self, data: Payload, options: Optional[RequestOptions]
    ) -> RequestSpec:
        return self._spec("POST", "customers", json=self._payload(data), options=options)

    def _update_spec(
        self, customer_id: int, data: Payload, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(customer_id, "customer")
        return self._spec(
            "PUT", f"customers/{customer_id}", json=self._payload(data), options=options
        )

    def _delete_spec(
        self, customer_id: int, options: Optional[RequestOptions]
    ) -> RequestSpec:
        self._validate_resource_id(customer_id, "customer")
        return self._spec("DELETE", f"customers/{customer_id}", options=options)

    def _delete_many_spec(
        self, customer_ids: List[int], options: Optional[RequestOptions]
    ) -> RequestSpec:
        validate_non_empty_list(customer_ids, "customer_ids")
        for customer_id in customer_ids:
            self._validate_resource_id(customer_id, "customer")
        return self._spec(
            "DELETE",
            "customers",
            json={"customers": list(customer_ids)},
            options=options,
        )
