from sandwiched.app_exceptions.app_exception import AppException


class BadRequestException(AppException):
    def __init__(self, message="Bad request"):
        self.message = message
        self.status_code = 400
        super().__init__(self.message, status_code=self.status_code)


class InvalidAddressException(BadRequestException):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Invalid address '{address}'")
