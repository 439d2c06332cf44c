"""
WeatherHub Platform - Hub Application

This Django application provides device check-in, room grouping, and
weather reading ingestion, plus a small HTML dashboard.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""
