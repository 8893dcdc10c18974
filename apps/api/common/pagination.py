# PATH: apps/api/common/pagination.py
from rest_framework.pagination import PageNumberPagination


class PerPagePagination(PageNumberPagination):
    """
    ?page=&per_page= pagination (per_page 1..100, default PAGE_SIZE)
    """
    page_size_query_param = "per_page"
    max_page_size = 100


class ContributorPagination(PageNumberPagination):
    page_size = 12
    page_size_query_param = None
