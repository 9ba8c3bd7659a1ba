from storefront.domain.customer import CustomerRepositoryInterface
from storefront.usecase.customer.dto import CustomerDto, InputListCustomerDto, OutputListCustomerDto


class ListCustomerUseCase:
    def __init__(self, customer_repository: CustomerRepositoryInterface):
        self.customer_repository = customer_repository

    def execute(self, input_dto: InputListCustomerDto) -> OutputListCustomerDto:
        customers = self.customer_repository.find_all()
        return OutputListCustomerDto(customers=[CustomerDto.from_entity(customer) for customer in customers])
