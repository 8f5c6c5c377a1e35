"""AsyncPG implementation of CustomerRepository."""

from typing import Any, Dict, Mapping, Optional

import asyncpg

from .....config.constants import DatabaseTables
from .....core.entities import AggregateMetadata
from .....core.value_objects import Address, CustomerId, Email, NationalCode, PhoneNumber
from .....infrastructure.persistence import AsyncpgRepository
from ...core.entities import Customer
from ...core.specifications import customers_by_application_user
from ...core.value_objects import CustomerStatus, Gender


class AsyncpgCustomerRepository(AsyncpgRepository[Customer]):
    """PostgreSQL customer repository.

    The address is flattened into ``address_*`` columns; value objects are
    stored as their normalized strings.
    """

    aggregate_type = "Customer"

    column_map = {
        "id": "id",
        "application_user_id": "application_user_id",
        "first_name": "first_name",
        "last_name": "last_name",
        "customer_status": "customer_status",
        "email.value": "email",
        "phone_number.value": "phone_number",
        "mobile_number.value": "mobile_number",
        "date_of_birth": "date_of_birth",
        "company_name": "company_name",
        "meta.is_deleted": "is_deleted",
        "meta.created_at": "created_at",
        "meta.updated_at": "updated_at",
    }

    def __init__(self, connection_pool: asyncpg.Pool, schema: str = DatabaseTables.SCHEMA):
        super().__init__(connection_pool, schema, DatabaseTables.CUSTOMERS)

    async def get_by_application_user_id(self, application_user_id: str) -> Optional[Customer]:
        return await self.find_one(customers_by_application_user(application_user_id))

    def _aggregate_to_row(self, customer: Customer) -> Dict[str, Any]:
        address = customer.primary_address
        meta = customer.meta
        return {
            "application_user_id": customer.application_user_id,
            "first_name": customer.first_name,
            "last_name": customer.last_name,
            "middle_name": customer.middle_name,
            "date_of_birth": customer.date_of_birth,
            "gender": customer.gender.value if customer.gender else None,
            "national_code": customer.national_code.value if customer.national_code else None,
            "passport_number": customer.passport_number,
            "address_street": address.street if address else None,
            "address_city": address.city if address else None,
            "address_postal_code": address.postal_code if address else None,
            "address_country": address.country if address else None,
            "address_province": address.province if address else None,
            "address_district": address.district if address else None,
            "address_details": address.details if address else None,
            "email": customer.email.value if customer.email else None,
            "phone_number": customer.phone_number.value if customer.phone_number else None,
            "mobile_number": customer.mobile_number.value if customer.mobile_number else None,
            "customer_status": customer.customer_status.value,
            "company_name": customer.company_name,
            "tax_id": customer.tax_id,
            "created_at": meta.created_at,
            "created_by": meta.created_by,
            "updated_at": meta.updated_at,
            "updated_by": meta.updated_by,
            "is_deleted": meta.is_deleted,
            "deleted_at": meta.deleted_at,
            "deleted_by": meta.deleted_by,
        }

    def _row_to_aggregate(self, row: Mapping[str, Any]) -> Customer:
        meta = AggregateMetadata(
            id=CustomerId(row["id"]),
            created_at=row["created_at"],
            created_by=row["created_by"],
            updated_at=row["updated_at"],
            updated_by=row["updated_by"],
            is_deleted=row["is_deleted"],
            deleted_at=row["deleted_at"],
            deleted_by=row["deleted_by"],
            version=row["version"],
            persisted_version=row["version"],
        )

        address = None
        if row["address_street"]:
            address = Address(
                street=row["address_street"],
                city=row["address_city"],
                postal_code=row["address_postal_code"],
                country=row["address_country"],
                province=row["address_province"],
                district=row["address_district"],
                details=row["address_details"],
            )

        return Customer(
            meta=meta,
            application_user_id=row["application_user_id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            middle_name=row["middle_name"],
            date_of_birth=row["date_of_birth"],
            gender=Gender(row["gender"]) if row["gender"] else None,
            national_code=NationalCode(row["national_code"]) if row["national_code"] else None,
            passport_number=row["passport_number"],
            primary_address=address,
            email=Email(row["email"]) if row["email"] else None,
            phone_number=PhoneNumber(row["phone_number"]) if row["phone_number"] else None,
            mobile_number=PhoneNumber(row["mobile_number"]) if row["mobile_number"] else None,
            customer_status=CustomerStatus(row["customer_status"]),
            company_name=row["company_name"],
            tax_id=row["tax_id"],
        )
