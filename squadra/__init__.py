"""Squadra: API di gestione per una squadra di calcio amatoriale."""
