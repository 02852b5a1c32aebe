"""
SalesReportService - Sales Aggregations

Totals and time-bucketed sales rollups over orders, platform-wide or for a
single seller. Used by the seller dashboard and the admin dashboard.
"""

import logging
from datetime import timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from django.conf import settings
from django.db.models import Count, Sum
from django.db.models.functions import TruncDate, TruncMonth
from django.utils import timezone

from marketplace.models import Order, Product
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err

logger = logging.getLogger(__name__)

PERIOD_DAILY = "daily"
PERIOD_MONTHLY = "monthly"


def months_ago_start(now, months: int):
    """Midnight on the first day of the month ``months`` months before ``now``."""
    month_index = now.year * 12 + (now.month - 1) - months
    year, month = divmod(month_index, 12)
    return now.replace(year=year, month=month + 1, day=1, hour=0, minute=0, second=0, microsecond=0)


class SalesReportService(BaseService):
    """
    Aggregations over Product and Order rows.

    ``seller_id=None`` means platform-wide.
    """

    @BaseService.log_performance
    def total_products(self, seller_id=None) -> ServiceResult[int]:
        products = Product.objects.all()
        if seller_id is not None:
            products = products.filter(seller_id=seller_id)
        return self.call_store(products.count, "counting products")

    @BaseService.log_performance
    def total_orders(self, seller_id=None) -> ServiceResult[int]:
        return self.call_store(self._orders(seller_id).count, "counting orders")

    @BaseService.log_performance
    def total_revenue(self, seller_id=None) -> ServiceResult[Decimal]:
        def revenue():
            total = self._orders(seller_id).aggregate(total=Sum("amount"))["total"]
            return total if total is not None else Decimal("0.00")

        return self.call_store(revenue, "summing revenue")

    @BaseService.log_performance
    def sales_data(self, period: str, seller_id=None) -> ServiceResult[List[Dict]]:
        """
        Order count and revenue per day or per month.

        Args:
            period: ``daily`` (last SALES_DAILY_WINDOW_DAYS days, buckets
                ``YYYY-MM-DD`` under ``date``) or ``monthly`` (last
                SALES_MONTHLY_WINDOW_MONTHS months, buckets ``YYYY-MM`` under
                ``month``)
            seller_id: restrict to one seller's orders

        Returns:
            ServiceResult with buckets sorted ascending:
            ``[{"date": "2024-05-01", "orderCount": 3, "revenue": Decimal("42.00")}, ...]``.
            Days or months without orders are omitted.
        """
        period = (period or "").strip().lower()
        now = timezone.now()

        if period == PERIOD_DAILY:
            days = getattr(settings, "SALES_DAILY_WINDOW_DAYS", 7)
            since = now - timedelta(days=days)
            bucket, key, fmt = TruncDate("order_date"), "date", "%Y-%m-%d"
        elif period == PERIOD_MONTHLY:
            months = getattr(settings, "SALES_MONTHLY_WINDOW_MONTHS", 12)
            since = months_ago_start(timezone.localtime(now), months - 1)
            bucket, key, fmt = TruncMonth("order_date"), "month", "%Y-%m"
        else:
            return service_err(ErrorCodes.INVALID_INPUT, f"Unknown period '{period}', use 'daily' or 'monthly'")

        def rollup():
            rows = (
                self._orders(seller_id)
                .filter(order_date__gte=since)
                .annotate(bucket=bucket)
                .values("bucket")
                .annotate(orderCount=Count("id"), revenue=Sum("amount"))
                .order_by("bucket")
            )
            return [
                {key: row["bucket"].strftime(fmt), "orderCount": row["orderCount"], "revenue": row["revenue"]}
                for row in rows
            ]

        return self.call_store(rollup, f"building {period} sales data")

    @staticmethod
    def _orders(seller_id: Optional[object]):
        orders = Order.objects.all()
        if seller_id is not None:
            orders = orders.filter(seller_id=seller_id)
        return orders
