from template_generator.infrastructure.external.text_generation.client import (
    ChatCompletionTextGenerator,
    build_text_generator,
)

__all__ = ["ChatCompletionTextGenerator", "build_text_generator"]
