from versepost.lifecycle.tracing import PostOperation, PostTracer

__all__ = [
    "PostOperation",
    "PostTracer",
]
