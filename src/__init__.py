"""Image Field OCR Service.

Runs Tesseract OCR over an uploaded image and extracts quoted name,
organization, address and mobile fields from the recognized text.
"""
