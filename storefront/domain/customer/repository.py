from storefront.domain.customer.customer import Customer
from storefront.domain.shared.repository import RepositoryInterface


class CustomerRepositoryInterface(RepositoryInterface[Customer]):
    """Persistence contract for customers."""
