"""Test fixtures for aiohttp-stubgen tests.

Sample description metadata as an API description parser would hand it
over, in the camelCase shape other generators dump.
"""

MINIMAL_DESCRIPTION = {
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
}

PETSTORE_DESCRIPTION = {
    'info': {
        'title': 'Petstore API',
        'description': 'A sample Petstore API for testing',
        'version': '2.3.0',
        'termsOfService': 'https://petstore.example.com/terms',
        'contact': {'email': 'pets@example.com'},
    },
    'servers': [
        {
            'url': 'https://{region}.petstore.example.com/{basePath}/',
            'variables': {
                'region': {'default': 'eu'},
                'basePath': {'default': 'api/v1'},
            },
        }
    ],
    'operationGroups': [
        {
            'classname': 'Pet',
            'imports': [
                'from petstore.models.pet import Pet',
                'from petstore.models.error import Error',
                'from petstore.typing_utils import JSONPayload',
            ],
            'operations': [
                {
                    'operationId': 'listPets',
                    'httpMethod': 'GET',
                    'path': '/pets',
                    'queryParams': [
                        {
                            'name': 'limit',
                            'dataType': 'int',
                            'required': False,
                            'description': 'Maximum number of pets to return',
                        },
                    ],
                    'headerParams': [
                        {'name': 'x_request_id', 'dataType': 'str', 'required': True},
                    ],
                    'responses': [
                        {'code': '200', 'baseType': 'Pet'},
                        {'code': 'default', 'baseType': 'Error'},
                    ],
                    'returnBaseType': 'Pet',
                },
                {
                    'operationId': 'createPet',
                    'httpMethod': 'POST',
                    'path': '/pets',
                    'bodyParam': {'name': 'body', 'dataType': 'Pet', 'required': True},
                    'responses': [
                        {'code': '400', 'baseType': 'Error'},
                        {'code': '201', 'baseType': 'Pet'},
                    ],
                },
                {
                    'operationId': 'getPet',
                    'httpMethod': 'GET',
                    'path': '/pets/{petId}',
                    'pathParams': [
                        {'name': 'pet_id', 'dataType': 'int', 'required': True},
                    ],
                    'cookieParams': [{'name': 'session'}],
                    'responses': [{'code': '404', 'baseType': 'Error'}],
                    'returnBaseType': 'Pet',
                },
                {
                    'operationId': 'deletePet',
                    'httpMethod': 'DELETE',
                    'path': '/pets/{petId}',
                    'pathParams': [
                        {'name': 'pet_id', 'dataType': 'int', 'required': True},
                    ],
                    'responses': [{'code': '204'}],
                },
            ],
        },
        {
            'classname': 'StoreOrder',
            'operations': [
                {
                    'operationId': 'placeOrder',
                    'httpMethod': 'POST',
                    'path': '/store/order',
                    'responses': [{'code': '2XX'}],
                    'returnBaseType': 'Order',
                },
            ],
        },
    ],
    'models': [
        {
            'classname': 'Pet',
            'vars': [
                {'name': 'id', 'dataType': 'int', 'baseType': 'int'},
                {
                    'name': 'category',
                    'dataType': 'Category | None',
                    'baseType': 'Category',
                    'complexType': 'Category',
                },
                {
                    'name': 'parent',
                    'dataType': 'Pet | None',
                    'datatypeWithEnum': 'Pet | None',
                    'baseType': 'Pet',
                    'complexType': 'Pet',
                },
                {
                    'name': 'children',
                    'dataType': 'list[Pet]',
                    'baseType': 'list',
                    'complexType': 'Pet',
                },
            ],
            'imports': ['Category', 'Pet', 'Tag', 'Category'],
        },
        {
            'classname': 'Category',
            'vars': [{'name': 'name', 'dataType': 'str'}],
        },
    ],
}
