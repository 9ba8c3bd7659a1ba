from storefront.domain.customer import CustomerRepositoryInterface
from storefront.usecase.customer.dto import InputFindCustomerDto, OutputFindCustomerDto


class FindCustomerUseCase:
    def __init__(self, customer_repository: CustomerRepositoryInterface):
        self.customer_repository = customer_repository

    def execute(self, input_dto: InputFindCustomerDto) -> OutputFindCustomerDto:
        customer = self.customer_repository.find(input_dto.id)
        return OutputFindCustomerDto.from_entity(customer)
