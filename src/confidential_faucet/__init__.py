"""Confidential token faucet: contract deployment and console UI."""
