"""REST endpoints under ``/api``"""
