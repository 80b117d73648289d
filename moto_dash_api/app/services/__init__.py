"""
Service layer.

``store`` defines the persistence interface and its SQLite
implementation, ``resource_service`` the generic CRUD service and
``resources`` the descriptors that turn it into the bike, fuel,
maintenance, part and tour services.  API handlers only talk to the
services, which receive the store through their constructor.
"""
