from django.contrib import admin
from django.utils.html import format_html

from .models import CartLine, Order, Product


class CartLineInline(admin.TabularInline):
    model = CartLine
    extra = 0
    fields = ('buyer', 'quantity', 'added_at')
    readonly_fields = ('buyer', 'added_at')


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'seller', 'category', 'cost', 'created_at')
    list_filter = ('category', 'created_at')
    search_fields = ('name', 'description', 'category', 'seller__username')
    readonly_fields = ('id', 'created_at', 'image_preview')
    inlines = [CartLineInline]

    fieldsets = (
        (None, {
            'fields': ('id', 'name', 'category', 'description', 'seller')
        }),
        ('Pricing', {
            'fields': ('cost',)
        }),
        ('Image', {
            'fields': ('image_url', 'image_key', 'image_preview')
        }),
        ('Timestamps', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        })
    )

    def image_preview(self, obj):
        return format_html('<img src="{}" width="100" height="100" />', obj.display_image_url)
    image_preview.short_description = "Preview"


@admin.register(CartLine)
class CartLineAdmin(admin.ModelAdmin):
    list_display = ('buyer', 'product', 'quantity', 'added_at', 'updated_at')
    search_fields = ('buyer__email', 'product__name')
    readonly_fields = ('id', 'added_at', 'updated_at')
    list_select_related = ('buyer', 'product')


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'product_name', 'quantity', 'amount', 'buyer', 'seller', 'payment_reference', 'order_date')
    list_filter = ('order_date',)
    search_fields = ('product_name', 'payment_reference', 'buyer__email', 'seller__username')
    date_hierarchy = 'order_date'

    # Orders are historical records
    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
