from sandwiched.app_exceptions.resource_not_found_error import (
    ResourceNotFoundException,
)


class PoolNotFoundException(ResourceNotFoundException):
    def __init__(self, pool_address: str):
        self.pool_address = pool_address
        super().__init__(f"Pool {pool_address} not found")
