# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# business logic and database access for a single concern:
#
#   blog_service     — CRUD for Blog, with the delete ownership check
#   user_service     — registration and listing for User
#   auth_service     — credential check and token issuance for login
#   testing_service  — wipe all data (test environment only)
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.
