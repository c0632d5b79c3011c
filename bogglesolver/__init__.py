"""Find all the words on a Boggle board."""
