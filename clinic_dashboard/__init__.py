# Clinic dashboard: resource list/modal/mutation pattern and its development data service
__version__ = "1.0.0"
