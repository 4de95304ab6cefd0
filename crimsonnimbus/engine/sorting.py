"""Sort request resolution for list queries."""

from typing import Optional, Sequence

from crimsonnimbus.config import DESCENDING_OPTIONS
from crimsonnimbus.models.outcomes import SortOrder, SortSpec


class SortSpecResolver:
    """Turns client sort parameters into a whitelisted SortSpec."""

    @staticmethod
    def resolve(
        requested_field: Optional[str],
        requested_order: Optional[str],
        allowed_fields: Sequence[str],
    ) -> SortSpec:
        """
        Resolve sort field and order.

        Unknown fields fall back to the first allowed field and anything that is
        not a descending synonym sorts ascending. Client input never fails.

        Args:
            requested_field: Field name from the request, if any
            requested_order: Order from the request, if any
            allowed_fields: Whitelist; the first entry is the default

        Returns:
            SortSpec to hand to the store
        """
        if not allowed_fields:
            raise ValueError("allowed_fields must not be empty")

        field = requested_field if requested_field in allowed_fields else allowed_fields[0]
        order = (
            SortOrder.DESCENDING
            if isinstance(requested_order, str) and requested_order.upper() in DESCENDING_OPTIONS
            else SortOrder.ASCENDING
        )
        return SortSpec(field=field, order=order)
