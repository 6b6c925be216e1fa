"""
Service layer.

- products: catalog CRUD shared by the function views and the REST resources
- weather: weather provider client
- textgen: text generation client
"""
