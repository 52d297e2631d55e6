"""
Pagination for administrative listings.
"""
from collections import OrderedDict

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """Page-number pagination over any object with ``count()`` and slicing.

    Works with querysets and with lazy repository listings alike, and
    reports the page position so back-office screens need no extra request.
    """
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        return Response(OrderedDict([
            ('count', self.page.paginator.count),
            ('page', self.page.number),
            ('total_pages', self.page.paginator.num_pages),
            ('next', self.get_next_link()),
            ('previous', self.get_previous_link()),
            ('results', data),
        ]))

    def get_paginated_response_schema(self, schema):
        paginated = super().get_paginated_response_schema(schema)
        paginated['properties']['page'] = {'type': 'integer', 'example': 1}
        paginated['properties']['total_pages'] = {'type': 'integer', 'example': 3}
        return paginated
