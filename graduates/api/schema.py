"""GraphQL schema for the graduates API."""

import strawberry
from flask import current_app
from strawberry.tools import merge_types

from graduates.api.notifications import NotificationMutations, NotificationQueries
from graduates.api.shorts import ShortMutations, ShortQueries
from graduates.errors import AppError

Query = merge_types("Query", (ShortQueries, NotificationQueries))
Mutation = merge_types("Mutation", (ShortMutations, NotificationMutations))


class GraduatesSchema(strawberry.Schema):
    def process_errors(self, errors, execution_context=None):
        unexpected = []
        for error in errors:
            original = getattr(error, "original_error", None)
            if isinstance(original, AppError):
                error.extensions = {**(error.extensions or {}), "code": original.kind}
                current_app.logger.info("GraphQL %s: %s", original.kind, original.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = GraduatesSchema(query=Query, mutation=Mutation)
