from storefront.usecase.customer.create import CreateCustomerUseCase
from storefront.usecase.customer.find import FindCustomerUseCase
from storefront.usecase.customer.list_all import ListCustomerUseCase
from storefront.usecase.customer.update import UpdateCustomerUseCase

__all__ = ["CreateCustomerUseCase", "FindCustomerUseCase", "ListCustomerUseCase", "UpdateCustomerUseCase"]
