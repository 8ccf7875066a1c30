"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (a JSON document on
disk or a SQL key-value table). Services depend on the KeyValueStorage
interface and the collection repositories rather than touching either backend.
"""
