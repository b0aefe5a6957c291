import requests
from requests import codes as status


class ContentError(Exception):
    pass


class ResponseError(ContentError):
    def __init__(self, response):
        super().__init__(self._build_error_message(response))
        self.status_code = response.status_code
        self.status_message = response.reason

    @staticmethod
    def _build_error_message(response):
        return 'Failed to get {url}: got {statusCode} ({statusMessage})'.format(
            url=response.url,
            statusCode=response.status_code,
            statusMessage=response.reason,
        )


class Contents:
    @classmethod
    def json(cls, resource, params=None, headers=None, timeout=None):
        response = cls.__get_ok(
            resource,
            params=params,
            headers=headers,
            timeout=timeout
        )
        try:
            return response.json()
        except ValueError as e:
            raise ContentError(
                'Invalid JSON from {url}: {error}'.format(url=response.url, error=e)
            ) from e

    @classmethod
    def __get_ok(cls, resource, params=None, headers=None, timeout=None):
        return cls.__check_ok(
            cls.__get(resource, params=params, headers=headers, timeout=timeout)
        )

    @staticmethod
    def __get(resource, params=None, headers=None, timeout=None):
        try:
            return requests.get(
                resource,
                params=params,
                headers=headers,
                timeout=timeout
            )
        except requests.RequestException as e:
            raise ContentError(str(e)) from e

    @staticmethod
    def __check_ok(response):
        if response.status_code != status.ok:
            raise ResponseError(response)
        return response
