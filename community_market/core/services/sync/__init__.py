from .product_synchronizer import ProductSynchronizer, build_projection
from .reconciler import ProductReconciler, ReconcileReport

__all__ = [
    "ProductReconciler",
    "ProductSynchronizer",
    "ReconcileReport",
    "build_projection",
]
