"""Operations backend for a trash bin valet and bin cleaning service."""
