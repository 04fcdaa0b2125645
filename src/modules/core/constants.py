"""Fixed message catalogs shared by every module.

``ResponseMessage`` holds the ``message`` field of API responses;
``ValidationMessage`` holds the per-field validation errors.
"""

from __future__ import annotations

from enum import Enum


class ResponseMessage(str, Enum):
    # Auth / users
    USER_CREATED = "User created successfully."
    USER_FETCHED = "User fetched successfully."
    USER_NOT_FOUND = "User not found."
    USER_ACTIVATED = "User has been activated successfully."
    USER_DEACTIVATED = "User has been deactivated successfully."
    LOGIN_SUCCESSFUL = "Login successful"
    LOGOUT_SUCCESSFUL = "Logout successful"
    TOKEN_REFRESHED = "Token refreshed successfully"
    INVALID_CREDENTIALS = "Invalid email or password"
    ACCOUNT_INACTIVE = "Your account is inactive. Please contact support."

    # Orders
    ORDER_CREATED = "Order created successfully."
    ORDER_UPDATED = "Order updated successfully."
    ORDER_DELETED = "Order deleted successfully."
    ORDER_FETCHED = "Order fetched successfully."
    ORDERS_FETCHED = "Orders fetched successfully."
    ORDER_NOT_FOUND = "Order not found."
    ORDERS_NOT_FOUND = "No orders found."
    NOT_ORDER_OWNER = "You are not authorized to modify this order."
    ORDER_TOTAL_TOO_LARGE = "The order total exceeds the maximum allowed amount."

    # Products / stock
    PRODUCT_FETCHED = "Product fetched successfully."
    PRODUCT_NOT_FOUND = "Product not found."
    STOCK_UPDATED = "Product stock updated successfully."
    INSUFFICIENT_STOCK = "Insufficient stock available."

    # Generic
    VALIDATION_FAILED = "The given data was invalid."
    UNEXPECTED_ERROR = "An unexpected error occurred."


class ValidationMessage(str, Enum):
    NAME_REQUIRED = "The name field is required."
    EMAIL_REQUIRED = "The email field is required."
    EMAIL_INVALID = "Please provide a valid email address."
    EMAIL_NOT_FOUND = "This email does not exist."
    EMAIL_TAKEN = "The email has already been taken."
    PASSWORD_REQUIRED = "The password field is required."
    PASSWORD_TOO_SHORT = "The password must be at least 8 characters."
    PRODUCT_ID_REQUIRED = "The product ID is required."
    PRODUCT_ID_INVALID = "The product ID must be an integer."
    PRODUCT_ID_NOT_FOUND = "The specified product does not exist."
    QUANTITY_REQUIRED = "The quantity is required."
    QUANTITY_INVALID = "The quantity must be an integer."
    QUANTITY_MIN = "The quantity must be at least 1."
    QUANTITY_MAX = "The quantity may not be greater than 2147483647."
