"""Service layer — resolution orchestration behind the ServiceResult contract.

Services never raise for missing data; they return ServiceResult.
"""
