class ApiKeyMissingError(Exception):
    def __init__(
        self,
        message="API key required. Please set \033[1mDD_API_KEY\033[22m or pass api_key.",
    ):
        self.message = message
        super().__init__(self.message)
