from rest_framework import serializers

from authentication.models import Address, Admin, Buyer, Seller


# ===== Output =====


class BuyerSerializer(serializers.ModelSerializer):
    dateOfBirth = serializers.DateField(source="date_of_birth", read_only=True, allow_null=True)
    mobileNumber = serializers.CharField(source="mobile_number", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Buyer
        fields = ["id", "name", "email", "gender", "dateOfBirth", "mobileNumber", "location", "createdAt"]
        read_only_fields = fields


class SellerSerializer(serializers.ModelSerializer):
    mobileNumber = serializers.CharField(source="mobile_number", read_only=True)
    nationalId = serializers.CharField(source="national_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Seller
        fields = ["id", "name", "username", "email", "mobileNumber", "nationalId", "location", "status", "createdAt"]
        read_only_fields = fields


class AdminSerializer(serializers.ModelSerializer):
    class Meta:
        model = Admin
        fields = ["id", "username"]
        read_only_fields = fields


class AddressSerializer(serializers.ModelSerializer):
    buyerId = serializers.UUIDField(source="buyer_id", read_only=True)
    houseNumber = serializers.CharField(source="house_number", max_length=50)

    class Meta:
        model = Address
        fields = ["id", "buyerId", "houseNumber", "street", "city", "state", "pincode"]
        read_only_fields = ["id", "buyerId"]


# ===== Input =====


class BuyerInputSerializer(serializers.Serializer):
    """Buyer registration / profile payload; keys are mapped to model field names."""

    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, max_length=128)
    gender = serializers.ChoiceField(choices=Buyer.GENDER_CHOICES, required=False, allow_blank=True)
    dateOfBirth = serializers.DateField(source="date_of_birth", required=False, allow_null=True)
    mobileNumber = serializers.CharField(source="mobile_number", max_length=20, required=False, allow_blank=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)


class SellerInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    username = serializers.CharField(max_length=50)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, max_length=128)
    mobileNumber = serializers.CharField(source="mobile_number", max_length=20, required=False, allow_blank=True)
    nationalId = serializers.CharField(source="national_id", max_length=30, required=False, allow_blank=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)


class CredentialsSerializer(serializers.Serializer):
    username = serializers.CharField(required=False)
    email = serializers.CharField(required=False)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class PasswordResetRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class PasswordResetConfirmSerializer(serializers.Serializer):
    token = serializers.CharField()
    newPassword = serializers.CharField(source="new_password", min_length=6, max_length=128, write_only=True)
