from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Sustainable Packaging Bot"
    LOG_LEVEL: str = "INFO"

    # Text-generation provider (OpenAI-compatible chat completions)
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_API_URL: str = "https://openrouter.ai/api/v1/chat/completions"
    OPENROUTER_MODEL: str = "deepseek/deepseek-chat:free"
    RECOMMENDATION_TEMPERATURE: float = 0.1
    RECOMMENDATION_TIMEOUT_SECONDS: float = 30.0
    RECOMMENDATION_MAX_RETRIES: int = 2

    # Supplier block used in the system prompt and on the PDF sheet
    SUPPLIER_NAME: str = "Uline Industrial Supply"
    SUPPLIER_PHONE: str = "1-800-295-5510"
    SUPPLIER_BOXES_URL: str = "https://www.uline.com/Product/GuidedNav?t=184360&dup=over"
    SUPPLIER_BUBBLE_WRAP_URL: str = "https://www.uline.com/BL_468/Uline-Industrial-Bubble-Rolls"
    SUPPLIER_DELIVERY: str = "1-2 business days"

    class Config:
        env_file = ".env"


settings = Settings()
