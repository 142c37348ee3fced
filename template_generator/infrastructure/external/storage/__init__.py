from template_generator.infrastructure.external.storage.upload_storage import UploadStorage

__all__ = ["UploadStorage"]
