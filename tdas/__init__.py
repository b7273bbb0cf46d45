"""Classic abstract data types and a web log analyzer built on them."""

__version__ = "0.1.0"
__all__ = ["errors", "pila", "cola", "lista", "cola_prioridad", "hashtable", "abb", "dos", "analyzer"]