"""
Device selection for clustering computations.

Clustering runs in float64, which not every accelerator supports, so the
default device is the CPU. Accelerators are used only when asked for.
"""

from typing import Optional, Union
import torch
import warnings


def get_default_device() -> torch.device:
    """Default device for clustering (always CPU)."""
    return torch.device('cpu')


def parse_device(device: Optional[Union[str, torch.device]] = None) -> torch.device:
    """Parse device specification.
    
    Args:
        device: Device specification
            - None: Use default (CPU)
            - 'cpu': Use CPU
            - 'cuda': Use default CUDA device
            - 'cuda:X': Use CUDA device X
            - torch.device: Use as-is
            
    Returns:
        Parsed device
    """
    if device is None:
        return get_default_device()
        
    if isinstance(device, torch.device):
        return device
        
    if isinstance(device, str):
        if device == 'cpu':
            return torch.device('cpu')
        elif device.startswith('cuda'):
            if not torch.cuda.is_available():
                warnings.warn("CUDA not available, falling back to CPU")
                return torch.device('cpu')
            return torch.device(device)
        else:
            raise ValueError(f"Unknown device: {device}")
    else:
        raise TypeError(f"Device must be str or torch.device, got {type(device)}")
