from .resource_bundle_module import ResourceBundleModule, create_kernel

__all__ = ["ResourceBundleModule", "create_kernel"]
