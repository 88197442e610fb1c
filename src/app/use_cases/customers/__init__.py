"""Customer use cases"""
from .create_customer import CreateCustomer
from .update_customer import UpdateCustomer
from .delete_customer import DeleteCustomer
from .get_customer import GetCustomer
from .list_customers import ListCustomers
from .search_customers import SearchCustomers
from .dtos import (
    BillingAddressDTO,
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerResponseDTO,
)

__all__ = [
    "CreateCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "GetCustomer",
    "ListCustomers",
    "SearchCustomers",
    "BillingAddressDTO",
    "CreateCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "CustomerResponseDTO",
]
