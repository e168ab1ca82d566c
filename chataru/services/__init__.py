"""
Services Package

sessions   - admin credential check and session tokens
catalogue  - product CRUD
enquiries  - contact-form submissions
uploads    - product image persistence
validation - request field parsing shared by the above
"""
