"Tests for the ecprim package."
