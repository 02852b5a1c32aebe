from django.contrib import admin

from .models import Address, Admin, Buyer, EmailDetails, Seller


class AddressInline(admin.TabularInline):
    model = Address
    extra = 0
    fields = ('house_number', 'street', 'city', 'state', 'pincode')


@admin.register(Buyer)
class BuyerAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'mobile_number', 'location', 'created_at')
    search_fields = ('name', 'email', 'mobile_number')
    readonly_fields = ('id', 'password', 'reset_token', 'reset_token_created_at', 'created_at', 'updated_at')
    inlines = [AddressInline]


@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    list_display = ('username', 'name', 'email', 'status', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('username', 'name', 'email')
    readonly_fields = ('id', 'password', 'reset_token', 'reset_token_created_at', 'created_at', 'updated_at')
    actions = ['approve_sellers', 'reject_sellers']

    def approve_sellers(self, request, queryset):
        updated = queryset.update(status=Seller.STATUS_APPROVED)
        self.message_user(request, f"{updated} seller(s) approved.")
    approve_sellers.short_description = "Approve selected sellers"

    def reject_sellers(self, request, queryset):
        updated = queryset.update(status=Seller.STATUS_REJECTED)
        self.message_user(request, f"{updated} seller(s) rejected.")
    reject_sellers.short_description = "Reject selected sellers"


@admin.register(Admin)
class PlatformAdminAdmin(admin.ModelAdmin):
    list_display = ('username', 'created_at')
    readonly_fields = ('id', 'password', 'created_at')


@admin.register(EmailDetails)
class EmailDetailsAdmin(admin.ModelAdmin):
    list_display = ('recipient', 'subject', 'sent', 'sent_at')
    list_filter = ('sent', 'sent_at')
    search_fields = ('recipient', 'subject')
    readonly_fields = ('id', 'recipient', 'subject', 'msg_body', 'sent', 'sent_at')
