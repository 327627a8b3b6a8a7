"""
Use Cases

Organized into domain folders:
- tenants/: Tenant lifecycle and provisioning
- barbershops/: Barbershop status and cascading delete
- users/: Role, suspension and deletion of user accounts
- dashboard/: Operator dashboard and review analytics

Import from subdirectories.
"""
