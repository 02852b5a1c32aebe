"""
AddressService - Buyer Shipping Addresses
"""

import logging
from typing import Any, Dict, List

from authentication.models import Address, Buyer
from utils.service_base import BaseService, ErrorCodes, ServiceResult, parse_id, service_err, service_ok

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = ("house_number", "street", "city", "state", "pincode")


class AddressService(BaseService):
    """Add, delete and list a buyer's addresses."""

    @BaseService.log_performance
    def add_address(self, buyer_id, data: Dict[str, Any]) -> ServiceResult[Address]:
        buyer_uuid = parse_id(buyer_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")

        missing = [field for field in ADDRESS_FIELDS if not str(data.get(field) or "").strip()]
        if missing:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"Missing required fields: {', '.join(missing)}")

        fields = {field: str(data[field]).strip() for field in ADDRESS_FIELDS}

        def create():
            if not Buyer.objects.filter(id=buyer_uuid).exists():
                return service_err(ErrorCodes.BUYER_NOT_FOUND, f"Buyer {buyer_uuid} not found")
            return Address.objects.create(buyer_id=buyer_uuid, **fields)

        created = self.call_store(create, f"adding address for buyer {buyer_uuid}")
        if created.ok:
            self.logger.info(f"Added address {created.value.id} for buyer {buyer_uuid}")
        return created

    @BaseService.log_performance
    def delete_address(self, address_id) -> ServiceResult[bool]:
        address_uuid = parse_id(address_id)
        if address_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid address id: {address_id}")

        deleted = self.call_store(
            lambda: Address.objects.filter(id=address_uuid).delete()[0], f"deleting address {address_uuid}"
        )
        if not deleted.ok:
            return deleted
        if not deleted.value:
            return service_err(ErrorCodes.ADDRESS_NOT_FOUND, f"Address {address_uuid} not found")
        return service_ok(True)

    @BaseService.log_performance
    def list_addresses(self, buyer_id) -> ServiceResult[List[Address]]:
        buyer_uuid = parse_id(buyer_id)
        if buyer_uuid is None:
            return service_err(ErrorCodes.INVALID_INPUT, f"Invalid buyer id: {buyer_id}")
        return self.call_store(
            lambda: list(Address.objects.filter(buyer_id=buyer_uuid)), f"listing addresses of buyer {buyer_uuid}"
        )
