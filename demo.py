#!/usr/bin/env python
"""
DBAP Demonstration Script

This script runs demonstrations of the DBAP panning functionality.
"""

import logging
import argparse
from dbap.panning.examples import (
    demonstrate_symmetric_panning,
    demonstrate_moving_source,
    demonstrate_rolloff_comparison,
)

def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='DBAP Demonstration Script')
    parser.add_argument('demo', nargs='?', choices=['symmetric', 'moving', 'rolloff', 'all'],
                      default='all', help='Which demo to run (default: all)')
    parser.add_argument('--blur', type=float, default=1.0,
                      help='Blur used by the moving source demo (default: 1.0)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser.parse_args()

if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    
    print("Distance-Based Amplitude Panning (DBAP) Demonstrations")
    print("======================================================")
    
    if args.demo == 'symmetric' or args.demo == 'all':
        print("\nRunning Symmetric Layout Demo:")
        print("------------------------------")
        demonstrate_symmetric_panning()
    
    if args.demo == 'moving' or args.demo == 'all':
        print("\nRunning Moving Source Demo:")
        print("---------------------------")
        demonstrate_moving_source(blur=args.blur)
    
    if args.demo == 'rolloff' or args.demo == 'all':
        print("\nRunning Rolloff Comparison Demo:")
        print("--------------------------------")
        demonstrate_rolloff_comparison()
    
    if args.demo == 'all':
        print("\nAll demonstrations complete!")
