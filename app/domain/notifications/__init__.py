"""Notification domain - booking event emails and PDF vouchers"""
