#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest
from flask import Flask, jsonify, abort
from utils.decorators import require_json, handle_errors
from utils.exceptions import (
    DomainError,
    ValidationError,
    NotFoundError,
    ConflictError,
    InternalError,
)


class TestUtilsDecorators(unittest.TestCase):
    def setUp(self):
        app = Flask(__name__)

        @app.route('/json_only', methods=['POST'])
        @require_json
        def json_only():
            return jsonify({'success': True})

        @app.route('/error_route')
        @handle_errors
        def error_route():
            raise RuntimeError('boom')

        errors = {
            'validation': ValidationError('bad input'),
            'not_found': NotFoundError('missing'),
            'conflict': ConflictError('busy'),
            'internal': InternalError('broken'),
            'domain': DomainError(),
        }

        @app.route('/domain/<kind>')
        @handle_errors
        def domain_route(kind):
            raise errors[kind]

        @app.route('/http_error')
        @handle_errors
        def http_error():
            abort(413)

        self.client = app.test_client()

    def test_require_json(self):
        resp = self.client.post('/json_only', data='not json', headers={'Content-Type': 'text/plain'})
        self.assertEqual(resp.status_code, 400)
        self.assertIn('JSON', resp.get_data(as_text=True))

        resp = self.client.post('/json_only', json={'a': 1})
        self.assertEqual(resp.status_code, 200)

    def test_handle_errors_unexpected(self):
        resp = self.client.get('/error_route')
        self.assertEqual(resp.status_code, 500)
        data = resp.get_json()
        self.assertIsNotNone(data)
        self.assertFalse(data.get('success'))
        self.assertEqual(data.get('code'), 'internal_error')
        self.assertIn('boom', data.get('message', ''))

    def test_handle_errors_domain_mapping(self):
        expected = {
            'validation': (400, 'validation_error'),
            'not_found': (404, 'not_found'),
            'conflict': (409, 'conflict'),
            'internal': (500, 'internal_error'),
            'domain': (400, 'domain_error'),
        }
        for kind, (status, code) in expected.items():
            resp = self.client.get(f'/domain/{kind}')
            self.assertEqual(resp.status_code, status, kind)
            self.assertEqual(resp.get_json()['code'], code)

    def test_http_exceptions_pass_through(self):
        resp = self.client.get('/http_error')
        self.assertEqual(resp.status_code, 413)


if __name__ == '__main__':
    unittest.main(verbosity=2)
